# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session as DbSession

from launchpad.domain.users.entities import Session as DomainSession
from launchpad.domain.users.entities import User as DomainUser
from launchpad.domain.users.exceptions import SessionConflictError, UserAlreadyExistsError
from launchpad.domain.users.repositories import SessionRepository, UserRepository
from launchpad.infrastructure.db.models import Session, User
from launchpad.infrastructure.unit_of_work import unit_of_work_scope
from launchpad.shared.logging import logger


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _to_domain_user(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=_as_utc(row.created_at),
    )


def _to_domain_session(row: Session) -> DomainSession:
    return DomainSession(id=row.id, user_id=row.user_id, expires_at=_as_utc(row.expires_at))


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], DbSession]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as db:
            row = db.query(User).filter(User.username == username).first()
            return _to_domain_user(row) if row else None

    def find_by_id(self, user_id: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as db:
            row = db.get(User, user_id)
            return _to_domain_user(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as db:
                row = User(
                    id=user.id,
                    username=user.username,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                db.add(row)
                db.flush()
                return _to_domain_user(row)
        except IntegrityError as exc:
            logger.info(f"users.add: integrity error for username={user.username}")
            raise UserAlreadyExistsError() from exc


class SqlAlchemySessionRepository(SessionRepository):
    def __init__(self, session_factory: Callable[[], DbSession]):
        self._session_factory = session_factory

    def insert(self, session: DomainSession) -> None:
        try:
            with unit_of_work_scope(self._session_factory) as db:
                db.add(
                    Session(
                        id=session.id,
                        user_id=session.user_id,
                        expires_at=session.expires_at,
                    )
                )
                db.flush()
        except IntegrityError as exc:
            logger.warning(f"sessions.insert: integrity error sid={session.id[:8]}…")
            raise SessionConflictError() from exc

    def find_with_user(self, session_id: str) -> tuple[DomainSession, DomainUser] | None:
        with unit_of_work_scope(self._session_factory) as db:
            row = (
                db.query(Session, User)
                .join(User, User.id == Session.user_id)
                .filter(Session.id == session_id)
                .first()
            )
            if row is None:
                return None
            session_row, user_row = row
            return _to_domain_session(session_row), _to_domain_user(user_row)

    def update_expiry(self, session_id: str, expires_at: datetime) -> bool:
        with unit_of_work_scope(self._session_factory) as db:
            updated = (
                db.query(Session)
                .filter(Session.id == session_id)
                .update({Session.expires_at: expires_at}, synchronize_session=False)
            )
        if not updated:
            logger.debug(f"sessions.update_expiry: sid={session_id[:8]}… already gone")
        return bool(updated)

    def delete(self, session_id: str) -> None:
        with unit_of_work_scope(self._session_factory) as db:
            db.query(Session).filter(Session.id == session_id).delete(synchronize_session=False)

    def delete_all_for_user(self, user_id: str) -> int:
        with unit_of_work_scope(self._session_factory) as db:
            return (
                db.query(Session)
                .filter(Session.user_id == user_id)
                .delete(synchronize_session=False)
            )
