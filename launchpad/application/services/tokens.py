# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session token and identifier generation."""

from __future__ import annotations

import base64
import hashlib
import secrets

SESSION_TOKEN_BYTES = 20
USER_ID_BYTES = 15


def _base32_lower(raw: bytes) -> str:
    return base64.b32encode(raw).decode("ascii").rstrip("=").lower()


def generate_session_token() -> str:
    """Return a fresh 160-bit token, lowercase base32 without padding."""
    return _base32_lower(secrets.token_bytes(SESSION_TOKEN_BYTES))


def derive_session_id(token: str) -> str:
    """Return the lookup id stored for ``token``: its SHA-256 hex digest."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def generate_user_id() -> str:
    # 120 bits, roughly a UUIDv4
    return _base32_lower(secrets.token_bytes(USER_ID_BYTES))


__all__ = ["derive_session_id", "generate_session_token", "generate_user_id"]
