"""Password hashing strategies."""

from __future__ import annotations

from argon2 import PasswordHasher as Argon2Hasher
from argon2 import Type
from argon2.exceptions import HashingError as Argon2HashingError
from argon2.exceptions import InvalidHashError, VerificationError

from launchpad.domain.users.repositories import PasswordHasher
from launchpad.shared.errors.base import HashingError
from launchpad.shared.logging import logger

# Shared by hash and verify so stored hashes stay verifiable.
MEMORY_COST_KIB = 19456
TIME_COST = 2
HASH_LENGTH = 32
PARALLELISM = 1


class Argon2PasswordHasher(PasswordHasher):
    def __init__(self) -> None:
        self._hasher = Argon2Hasher(
            time_cost=TIME_COST,
            memory_cost=MEMORY_COST_KIB,
            parallelism=PARALLELISM,
            hash_len=HASH_LENGTH,
            type=Type.ID,
        )

    def hash(self, password: str) -> str:
        try:
            return self._hasher.hash(password)
        except Argon2HashingError as exc:
            logger.error(f"password_hashing: argon2 primitive failed: {type(exc).__name__}")
            raise HashingError() from exc

    def verify(self, password: str, hashed: str) -> bool:
        if not password or not hashed:
            return False
        try:
            return bool(self._hasher.verify(hashed, password))
        except (VerificationError, InvalidHashError):
            return False
