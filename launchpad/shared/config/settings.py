# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from datetime import timedelta
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SETTINGS = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    validate_by_name=True,
)


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///app.db", alias="DATABASE_URL")
    auth_token: str | None = Field(None, alias="DATABASE_AUTH_TOKEN")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _SETTINGS

    def url_configured(self) -> bool:
        return "url" in self.model_fields_set


class SessionConfig(BaseSettings):
    cookie_name: str = Field("auth-session", alias="SESSION_COOKIE_NAME")
    lifetime_days: float = Field(30.0, gt=0, alias="SESSION_LIFETIME_DAYS")
    renewal_window_days: float = Field(15.0, gt=0, alias="SESSION_RENEWAL_WINDOW_DAYS")

    model_config = _SETTINGS

    @model_validator(mode="after")
    def _check_window(self) -> "SessionConfig":
        if self.renewal_window_days > self.lifetime_days:
            raise ValueError("SESSION_RENEWAL_WINDOW_DAYS must not exceed SESSION_LIFETIME_DAYS")
        return self

    @property
    def lifetime(self) -> timedelta:
        return timedelta(days=self.lifetime_days)

    @property
    def renewal_window(self) -> timedelta:
        return timedelta(days=self.renewal_window_days)


class SecurityConfig(BaseSettings):
    # None means "secure everywhere except development"
    cookie_secure: bool | None = Field(None, alias="COOKIE_SECURE")

    allowed_origins: list[str] = Field(["*"], alias="ALLOWED_ORIGINS")

    enable_rate_limit: bool = Field(True, alias="ENABLE_RATE_LIMIT")

    # None means "on in production"
    enable_hsts: bool | None = Field(None, alias="ENABLE_HSTS")

    model_config = _SETTINGS

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("cookie_secure", "enable_hsts", mode="before")
    @classmethod
    def _parse_optional_bool(cls, value: str | bool | None) -> bool | None:
        if value is None or value == "":
            return None
        return _parse_bool(value)

    @field_validator("enable_rate_limit", mode="before")
    @classmethod
    def _parse_flag(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _session_config_factory() -> SessionConfig:
    return SessionConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    site_url: str = Field("https://your-site.com", alias="SITE_URL")
    site_name: str = Field("Launchpad", alias="SITE_NAME")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    session: SessionConfig = Field(default_factory=_session_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = _SETTINGS

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @field_validator("site_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        warnings = []
        if self.security.cookie_secure is False:
            warnings.append("⚠️  Session cookie Secure flag is DISABLED (use HTTPS!)")
        if "*" in self.security.allowed_origins:
            warnings.append("⚠️  CORS allows wildcard (*) origins")
        if self.security.enable_hsts is False:
            warnings.append("⚠️  HSTS is DISABLED (recommended for HTTPS)")
        if self.site_url == "https://your-site.com":
            warnings.append("⚠️  SITE_URL still points at the placeholder domain")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)
            print("   Review these settings before serving traffic.\n", file=sys.stderr)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def is_development(self) -> bool:
        return self.app_env.lower() in ("development", "dev", "local", "test")

    def session_cookie_secure(self) -> bool:
        if self.security.cookie_secure is not None:
            return self.security.cookie_secure
        return not self.is_development()

    def hsts_enabled(self) -> bool:
        if self.security.enable_hsts is not None:
            return self.security.enable_hsts
        return self.is_production()


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "DatabaseConfig", "SecurityConfig", "SessionConfig", "load_config"]
