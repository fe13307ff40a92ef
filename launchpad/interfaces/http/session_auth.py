# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from flask import Flask, g, request

from launchpad.application.services.sessions import SessionManager
from launchpad.domain.users.entities import Session, SessionContext, User
from launchpad.interfaces.http.session_cookies import (
    delete_session_cookie,
    read_session_token,
    set_session_cookie,
)
from launchpad.shared.errors.base import UnauthorizedError
from launchpad.shared.logging import logger


def current_context() -> SessionContext:
    return getattr(g, "auth", None) or SessionContext.empty()


def current_user() -> User | None:
    return current_context().user


def current_session() -> Session | None:
    return current_context().session


def configure_session_auth(app: Flask, manager: SessionManager) -> None:
    """Validate the session cookie before each request and sync it afterwards."""

    @app.before_request
    def _load_session() -> None:
        token = read_session_token(request.cookies)
        g.session_token = token
        if not token:
            g.auth = SessionContext.empty()
            return
        g.auth = manager.validate_session_token(token)

    @app.after_request
    def _sync_cookie(response):
        if getattr(g, "session_cookie_written", False):
            return response
        token = getattr(g, "session_token", "")
        if not token:
            return response
        auth = current_context()
        if auth.session is None:
            delete_session_cookie(response)
        elif auth.refresh_cookie:
            set_session_cookie(response, token, auth.session.expires_at)
        return response


def login_required(f: Callable):
    @wraps(f)
    def inner(*args, **kwargs):
        if not current_context().authenticated:
            logger.warning(f"Unauthenticated request to {request.method} {request.path}")
            raise UnauthorizedError()
        return f(*args, **kwargs)

    return inner


__all__ = [
    "configure_session_auth",
    "current_context",
    "current_session",
    "current_user",
    "login_required",
]
