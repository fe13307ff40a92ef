# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from launchpad.application.services.sessions import SessionManager
from launchpad.application.services.tokens import generate_session_token, generate_user_id
from launchpad.domain.users.entities import Session, User
from launchpad.domain.users.exceptions import RegistrationConflictError, UserAlreadyExistsError
from launchpad.domain.users.repositories import PasswordHasher, UserRepository
from launchpad.shared.errors.base import ConflictError
from launchpad.shared.logging import logger


def normalize_username(username: str) -> str:
    return username.strip().lower()


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionManager,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> tuple[User, str, Session]:
        normalized = normalize_username(username)
        try:
            if self._users.find_by_username(normalized):
                raise UserAlreadyExistsError()
            hashed = self._password_hasher.hash(password)
            user = User(
                id=generate_user_id(),
                username=normalized,
                password_hash=hashed,
                created_at=datetime.now(UTC),
            )
            persisted = self._users.add(user)
            token = generate_session_token()
            session = self._sessions.create_session(token, persisted.id)
        except ConflictError as exc:
            # duplicate username and session-id collision look the same to the client
            logger.info(f"auth.register: conflict ({exc.code}) username={normalized}")
            raise RegistrationConflictError() from exc
        return persisted, token, session
