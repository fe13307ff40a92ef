# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:
    """A registered account; ``username`` is stored lowercased."""

    id: str
    username: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Session:
    """A persisted session. ``id`` is the lookup hash, never the raw token."""

    id: str
    user_id: str
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


@dataclass(slots=True, frozen=True)
class SessionContext:
    """Outcome of validating a session token.

    ``refresh_cookie`` tells the transport layer to re-issue the cookie with
    ``session.expires_at``; an empty context means the caller is logged out.
    """

    session: Session | None = None
    user: User | None = None
    refresh_cookie: bool = False

    @classmethod
    def empty(cls) -> SessionContext:
        return cls()

    @property
    def authenticated(self) -> bool:
        return self.session is not None and self.user is not None
