from __future__ import annotations

import pytest
from argon2.exceptions import HashingError as Argon2HashingError

from launchpad.application.services.password_hashing import (
    HASH_LENGTH,
    MEMORY_COST_KIB,
    PARALLELISM,
    TIME_COST,
    Argon2PasswordHasher,
)
from launchpad.shared.errors.base import HashingError


@pytest.fixture(scope="module")
def hasher() -> Argon2PasswordHasher:
    return Argon2PasswordHasher()


@pytest.mark.parametrize("password", ["secret1", "x" * 6, "пароль-с-юникодом", "p" * 255])
def test_hash_then_verify_round_trip(hasher: Argon2PasswordHasher, password: str) -> None:
    stored = hasher.hash(password)

    assert stored != password
    assert hasher.verify(password, stored) is True


def test_wrong_password_does_not_verify(hasher: Argon2PasswordHasher) -> None:
    stored = hasher.hash("secret1")

    assert hasher.verify("secret2", stored) is False


def test_hash_embeds_fixed_parameters(hasher: Argon2PasswordHasher) -> None:
    stored = hasher.hash("secret1")

    assert stored.startswith("$argon2id$v=19$")
    assert f"m={MEMORY_COST_KIB},t={TIME_COST},p={PARALLELISM}" in stored
    assert HASH_LENGTH == 32


def test_same_password_hashes_differently(hasher: Argon2PasswordHasher) -> None:
    assert hasher.hash("secret1") != hasher.hash("secret1")


@pytest.mark.parametrize("stored", ["", "not-a-hash", "$argon2id$v=19$garbage"])
def test_verify_never_raises_on_malformed_hash(
    hasher: Argon2PasswordHasher, stored: str
) -> None:
    assert hasher.verify("secret1", stored) is False


def test_primitive_failure_becomes_hashing_error(monkeypatch: pytest.MonkeyPatch) -> None:
    hasher = Argon2PasswordHasher()

    class _FailingArgon2:
        def hash(self, _password: str) -> str:
            raise Argon2HashingError("out of memory")

    monkeypatch.setattr(hasher, "_hasher", _FailingArgon2())

    with pytest.raises(HashingError) as excinfo:
        hasher.hash("secret1")
    assert excinfo.value.code == "internal_error"
    assert excinfo.value.status == 500
