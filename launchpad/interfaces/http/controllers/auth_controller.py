# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from launchpad.application.use_cases.users.login_user import LoginUserUseCase
from launchpad.application.use_cases.users.logout_user import LogoutUserUseCase
from launchpad.application.use_cases.users.register_user import RegisterUserUseCase
from launchpad.domain.users.entities import User
from launchpad.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
    UserDTO,
)
from launchpad.interfaces.http.session_auth import current_session
from launchpad.interfaces.http.session_cookies import delete_session_cookie, set_session_cookie
from launchpad.shared.errors.base import UnauthorizedError
from launchpad.shared.errors.validation import raise_validation_error
from launchpad.shared.logging import logger
from launchpad.shared.middleware.rate_limit import rate_limit


def _request_payload() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


def _success(user: User) -> Response:
    dto = AuthSuccessDTO(user=UserDTO(id=user.id, username=user.username))
    return jsonify(dto.model_dump())


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case

    @rate_limit(limit=5, window_seconds=60.0)
    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(_request_payload())
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token, session = self._register_use_case.execute(dto.username, dto.password)

        response = _success(user)
        set_session_cookie(response, token, session.expires_at)
        logger.info(f"auth.register: ok user_id={user.id}")
        return response, 201

    @rate_limit(limit=10, window_seconds=60.0)
    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(_request_payload())
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token, session = self._login_use_case.execute(dto.username, dto.password)

        response = _success(user)
        set_session_cookie(response, token, session.expires_at)
        logger.info(f"auth.login: ok user_id={user.id}")
        return response, 200

    def logout(self) -> tuple[Response, int]:
        session = current_session()
        if session is None:
            raise UnauthorizedError()

        self._logout_use_case.execute(session.id)

        response = jsonify({"ok": True})
        delete_session_cookie(response)
        logger.info(f"auth.logout: ok user_id={session.user_id}")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/sign-up", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/sign-in", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/sign-out", view_func=self.logout, methods=["POST"])
        return bp
