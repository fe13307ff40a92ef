# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum


class ValidationErrorType(StrEnum):
    MISSING = "missing"
    USERNAME_TOO_SHORT = "username_too_short"
    USERNAME_TOO_LONG = "username_too_long"
    USERNAME_INVALID_CHARS = "username_invalid_chars"
    USERNAME_BAD_EDGE = "username_bad_edge"
    USERNAME_ALL_DIGITS = "username_all_digits"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_TOO_LONG = "password_too_long"


__all__ = ["ValidationErrorType"]
