from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from launchpad.shared.config import AppConfig, SessionConfig


def test_session_defaults() -> None:
    config = SessionConfig()

    assert config.cookie_name == "auth-session"
    assert config.lifetime == timedelta(days=30)
    assert config.renewal_window == timedelta(days=15)


def test_session_window_cannot_exceed_lifetime() -> None:
    with pytest.raises(ValidationError):
        SessionConfig(SESSION_LIFETIME_DAYS=10, SESSION_RENEWAL_WINDOW_DAYS=11)


def test_cookie_secure_outside_development() -> None:
    assert AppConfig(APP_ENV="development").session_cookie_secure() is False
    assert AppConfig(APP_ENV="staging").session_cookie_secure() is True
    assert AppConfig(APP_ENV="production").session_cookie_secure() is True


def test_explicit_cookie_secure_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COOKIE_SECURE", "true")

    assert AppConfig(APP_ENV="development").session_cookie_secure() is True


def test_hsts_follows_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    assert AppConfig(APP_ENV="production").hsts_enabled() is True
    assert AppConfig(APP_ENV="development").hsts_enabled() is False

    monkeypatch.setenv("ENABLE_HSTS", "false")
    assert AppConfig(APP_ENV="production").hsts_enabled() is False


def test_origins_and_site_url_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.com, https://b.com")

    config = AppConfig(SITE_URL="https://example.com/")

    assert config.security.allowed_origins == ["https://a.com", "https://b.com"]
    assert config.site_url == "https://example.com"
