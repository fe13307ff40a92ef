from __future__ import annotations

import re

from launchpad.application.services.tokens import (
    derive_session_id,
    generate_session_token,
    generate_user_id,
)

_BASE32_LOWER = re.compile(r"^[a-z2-7]+$")


def test_session_token_is_lowercase_base32_with_160_bits() -> None:
    token = generate_session_token()

    assert len(token) == 32  # 20 bytes, no padding
    assert _BASE32_LOWER.match(token)


def test_session_tokens_are_unique() -> None:
    tokens = {generate_session_token() for _ in range(5000)}

    assert len(tokens) == 5000


def test_derive_session_id_is_deterministic_sha256_hex() -> None:
    token = generate_session_token()

    first = derive_session_id(token)

    assert first == derive_session_id(token)
    assert re.fullmatch(r"[0-9a-f]{64}", first)
    assert first != token


def test_known_digest() -> None:
    assert derive_session_id("abc") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_distinct_tokens_never_share_lookup_id() -> None:
    tokens = [generate_session_token() for _ in range(10000)]

    ids = {derive_session_id(token) for token in tokens}

    assert len(ids) == len(set(tokens))


def test_user_id_has_120_bits() -> None:
    user_id = generate_user_id()

    assert len(user_id) == 24
    assert _BASE32_LOWER.match(user_id)
