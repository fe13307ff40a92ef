# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from launchpad.shared.config import AppConfig
from launchpad.shared.logging import logger


def check_database(engine: Engine) -> bool:
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error(f"health: database check failed: {type(exc).__name__}: {exc}")
        return False
    return True


@dataclass(slots=True)
class HealthReport:
    database: bool
    environment: dict[str, bool]
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def healthy(self) -> bool:
        return self.database and all(self.environment.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "healthy" if self.healthy else "unhealthy",
            "checks": {
                "database": self.database,
                "environment": dict(self.environment),
                "timestamp": self.timestamp.isoformat(),
            },
        }


class HealthChecker:
    def __init__(self, *, engine: Engine, config: AppConfig) -> None:
        self._engine = engine
        self._config = config

    def run(self) -> HealthReport:
        database = self._config.database
        environment = {
            "database_url": database.url_configured(),
            # a token is only required outside development
            "database_token": bool(database.auth_token) or self._config.is_development(),
        }
        return HealthReport(database=check_database(self._engine), environment=environment)


__all__ = ["HealthChecker", "HealthReport", "check_database"]
