# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session lifecycle: creation, validation with sliding renewal, invalidation.

A session moves between four states, and only on validation or sign-out:

* active     -- ``now < expires_at`` and outside the renewal window
* renewable  -- ``now < expires_at`` and ``expires_at - now < renewal_window``
* expired    -- ``now >= expires_at``; deleted when seen
* revoked    -- deleted by sign-out

Renewal pushes ``expires_at`` to ``now + lifetime``. With the default policy
(30 days, 15-day window) that is at most one write per half lifetime, so
active users stay signed in and idle sessions lapse.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import UTC, datetime, timedelta

from launchpad.application.services.tokens import derive_session_id
from launchpad.domain.users.entities import Session, SessionContext
from launchpad.domain.users.repositories import SessionRepository
from launchpad.shared.config import SessionConfig
from launchpad.shared.logging import logger

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True, frozen=True)
class SessionPolicy:
    lifetime: timedelta = timedelta(days=30)
    renewal_window: timedelta = timedelta(days=15)

    def __post_init__(self) -> None:
        if self.lifetime <= timedelta(0):
            raise ValueError("session lifetime must be positive")
        if self.renewal_window <= timedelta(0):
            raise ValueError("renewal window must be positive")
        if self.renewal_window > self.lifetime:
            raise ValueError("renewal window must not exceed the session lifetime")

    @classmethod
    def from_config(cls, config: SessionConfig) -> SessionPolicy:
        return cls(lifetime=config.lifetime, renewal_window=config.renewal_window)

    def needs_renewal(self, session: Session, now: datetime) -> bool:
        return session.expires_at - now < self.renewal_window


class SessionManager:
    def __init__(
        self,
        *,
        sessions: SessionRepository,
        policy: SessionPolicy | None = None,
        clock: Clock = utcnow,
    ) -> None:
        self._sessions = sessions
        self._policy = policy or SessionPolicy()
        self._clock = clock

    @property
    def policy(self) -> SessionPolicy:
        return self._policy

    def create_session(self, token: str, user_id: str) -> Session:
        session = Session(
            id=derive_session_id(token),
            user_id=user_id,
            expires_at=self._clock() + self._policy.lifetime,
        )
        self._sessions.insert(session)
        logger.info(
            f"sessions.create: user={user_id} sid={session.id[:8]}… "
            f"exp={session.expires_at.isoformat()}"
        )
        return session

    def validate_session_token(self, token: str) -> SessionContext:
        session_id = derive_session_id(token)
        found = self._sessions.find_with_user(session_id)
        if found is None:
            logger.debug(f"sessions.validate: unknown sid={session_id[:8]}…")
            return SessionContext.empty()

        session, user = found
        now = self._clock()

        if session.is_expired(now):
            self._sessions.delete(session.id)
            logger.info(f"sessions.validate: expired sid={session.id[:8]}… user={user.id}")
            return SessionContext.empty()

        if self._policy.needs_renewal(session, now):
            renewed = replace(session, expires_at=now + self._policy.lifetime)
            if not self._sessions.update_expiry(renewed.id, renewed.expires_at):
                # revoked between lookup and renewal
                logger.info(f"sessions.validate: renewal lost to delete sid={session.id[:8]}…")
                return SessionContext.empty()
            logger.info(
                f"sessions.validate: renewed sid={session.id[:8]}… user={user.id} "
                f"exp={renewed.expires_at.isoformat()}"
            )
            return SessionContext(session=renewed, user=user, refresh_cookie=True)

        return SessionContext(session=session, user=user, refresh_cookie=False)

    def invalidate_session(self, session_id: str) -> None:
        self._sessions.delete(session_id)
        logger.info(f"sessions.invalidate: sid={session_id[:8]}…")

    def invalidate_user_sessions(self, user_id: str) -> int:
        removed = self._sessions.delete_all_for_user(user_id)
        logger.info(f"sessions.invalidate_all: user={user_id} removed={removed}")
        return removed


__all__ = ["Clock", "SessionManager", "SessionPolicy", "utcnow"]
