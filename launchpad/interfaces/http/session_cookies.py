# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session cookie transport: the only place that writes the auth cookie."""

from __future__ import annotations

from datetime import datetime

from flask import Response, g

from launchpad.shared.config import AppConfig, load_config


def _cookie_name(config: AppConfig) -> str:
    return config.session.cookie_name


def read_session_token(cookies, config: AppConfig | None = None) -> str:
    config = config or load_config()
    return (cookies.get(_cookie_name(config)) or "").strip()


def set_session_cookie(
    response: Response, token: str, expires_at: datetime, config: AppConfig | None = None
) -> None:
    config = config or load_config()
    response.set_cookie(
        _cookie_name(config),
        token,
        expires=expires_at,
        path="/",
        httponly=True,
        secure=config.session_cookie_secure(),
        samesite="Lax",
    )
    g.session_cookie_written = True


def delete_session_cookie(response: Response, config: AppConfig | None = None) -> None:
    config = config or load_config()
    response.delete_cookie(
        _cookie_name(config),
        path="/",
        httponly=True,
        secure=config.session_cookie_secure(),
        samesite="Lax",
    )
    g.session_cookie_written = True


__all__ = ["delete_session_cookie", "read_session_token", "set_session_cookie"]
