# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import Session, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def find_by_id(self, user_id: str) -> User | None: ...
    def add(self, user: User) -> User: ...


class SessionRepository(Protocol):
    def insert(self, session: Session) -> None: ...
    def find_with_user(self, session_id: str) -> tuple[Session, User] | None: ...
    def update_expiry(self, session_id: str, expires_at: datetime) -> bool: ...
    def delete(self, session_id: str) -> None: ...
    def delete_all_for_user(self, user_id: str) -> int: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
