# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from launchpad.shared.errors.base import ConflictError, DomainError

REGISTRATION_FAILED_MESSAGE = "An error has occurred. Username may already be taken."


class UserAlreadyExistsError(ConflictError):
    code = "user_already_exists"


class SessionConflictError(ConflictError):
    code = "session_conflict"


class RegistrationConflictError(ConflictError):
    code = "registration_failed"

    def __init__(self) -> None:
        super().__init__(context={"message": REGISTRATION_FAILED_MESSAGE})


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
