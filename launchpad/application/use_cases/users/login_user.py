# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from launchpad.application.services.sessions import SessionManager
from launchpad.application.services.tokens import generate_session_token
from launchpad.application.use_cases.users.register_user import normalize_username
from launchpad.domain.users.entities import Session, User
from launchpad.domain.users.exceptions import InvalidCredentialsError
from launchpad.domain.users.repositories import PasswordHasher, UserRepository


class LoginUserUseCase:
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
        user = self._users.find_by_username(normalize_username(username))
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        token = generate_session_token()
        session = self._sessions.create_session(token, user.id)
        return user, token, session
