from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from launchpad.shared.errors.validation_types import ValidationErrorType

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 31
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 255

_USERNAME_CHARS = re.compile(r"^[a-zA-Z0-9_-]+$")


def _check_username(value: str) -> str:
    trimmed = value.strip()
    if not trimmed:
        raise PydanticCustomError(ValidationErrorType.MISSING, "Username cannot be empty", {})

    if len(trimmed) < USERNAME_MIN_LENGTH:
        raise PydanticCustomError(
            ValidationErrorType.USERNAME_TOO_SHORT,
            "Username must be at least {min_length} characters long",
            {"min_length": USERNAME_MIN_LENGTH},
        )

    if len(trimmed) > USERNAME_MAX_LENGTH:
        raise PydanticCustomError(
            ValidationErrorType.USERNAME_TOO_LONG,
            "Username must be {max_length} characters or less",
            {"max_length": USERNAME_MAX_LENGTH},
        )

    if not _USERNAME_CHARS.match(trimmed):
        raise PydanticCustomError(
            ValidationErrorType.USERNAME_INVALID_CHARS,
            "Username can only contain letters, numbers, underscores, and hyphens",
            {"pattern": _USERNAME_CHARS.pattern},
        )

    if trimmed[0] in "_-" or trimmed[-1] in "_-":
        raise PydanticCustomError(
            ValidationErrorType.USERNAME_BAD_EDGE,
            "Username cannot start or end with an underscore or hyphen",
            {},
        )

    if trimmed.isdigit():
        raise PydanticCustomError(
            ValidationErrorType.USERNAME_ALL_DIGITS,
            "Username cannot be all numbers",
            {},
        )

    return trimmed.lower()


class RegisterRequestDTO(BaseModel):
    username: str
    password: str

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_username(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if len(value) < PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_SHORT,
                "Password must be at least {min_length} characters long",
                {"min_length": PASSWORD_MIN_LENGTH},
            )
        if len(value) > PASSWORD_MAX_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_LONG,
                "Password must be {max_length} characters or less",
                {"max_length": PASSWORD_MAX_LENGTH},
            )
        return value


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=PASSWORD_MAX_LENGTH)  # no strength check on login

    @field_validator("username")
    @classmethod
    def normalize_username(cls, value: str) -> str:
        return value.strip().lower()


class UserDTO(BaseModel):
    id: str
    username: str


class AuthSuccessDTO(BaseModel):
    ok: bool = True
    user: UserDTO
