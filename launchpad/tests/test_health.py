from __future__ import annotations

from flask.testing import FlaskClient
from sqlalchemy import create_engine

from launchpad.infrastructure.health import HealthChecker, check_database
from launchpad.shared.config import AppConfig, load_config


def test_health_reports_healthy(client: FlaskClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["status"] == "healthy"
    assert payload["checks"]["database"] is True
    assert payload["checks"]["environment"] == {"database_url": True, "database_token": True}
    assert "timestamp" in payload["checks"]


def test_check_database_false_when_unreachable(tmp_path) -> None:
    broken = create_engine(f"sqlite:///{tmp_path}/missing-dir/app.db")

    assert check_database(broken) is False


def test_health_unhealthy_when_database_down(tmp_path) -> None:
    broken = create_engine(f"sqlite:///{tmp_path}/missing-dir/app.db")
    report = HealthChecker(engine=broken, config=load_config()).run()

    assert report.healthy is False
    assert report.to_dict()["status"] == "unhealthy"


def test_production_requires_database_token(engine) -> None:
    config = AppConfig(APP_ENV="production", SITE_URL="https://example.com")

    report = HealthChecker(engine=engine, config=config).run()

    assert report.database is True
    assert report.environment["database_token"] is False
    assert report.healthy is False
