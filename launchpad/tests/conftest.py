from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from dataclasses import replace
from datetime import UTC, datetime, timedelta

_TMP = tempfile.mkdtemp(prefix="launchpad-tests-")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("LOG_FILE", os.path.join(_TMP, "app.log"))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402

from launchpad.app import create_app  # noqa: E402
from launchpad.domain.users.entities import Session, User  # noqa: E402
from launchpad.domain.users.exceptions import SessionConflictError  # noqa: E402
from launchpad.domain.users.repositories import SessionRepository  # noqa: E402
from launchpad.infrastructure.container import Container  # noqa: E402
from launchpad.infrastructure.db import (  # noqa: E402
    Base,
    create_db_engine,
    init_db,
    make_session_factory,
)
from launchpad.shared.config import load_config  # noqa: E402
from launchpad.shared.config.settings import DatabaseConfig  # noqa: E402
from launchpad.shared.middleware.rate_limit import reset_rate_limits  # noqa: E402


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2030, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


class InMemorySessionRepository(SessionRepository):
    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        self.sessions: dict[str, Session] = {}
        self.expiry_writes = 0

    def insert(self, session: Session) -> None:
        if session.id in self.sessions:
            raise SessionConflictError()
        self.sessions[session.id] = session

    def find_with_user(self, session_id: str) -> tuple[Session, User] | None:
        session = self.sessions.get(session_id)
        if session is None:
            return None
        return session, self.users[session.user_id]

    def update_expiry(self, session_id: str, expires_at: datetime) -> bool:
        self.expiry_writes += 1
        session = self.sessions.get(session_id)
        if session is None:
            return False
        self.sessions[session_id] = replace(session, expires_at=expires_at)
        return True

    def delete(self, session_id: str) -> None:
        self.sessions.pop(session_id, None)

    def delete_all_for_user(self, user_id: str) -> int:
        doomed = [sid for sid, s in self.sessions.items() if s.user_id == user_id]
        for sid in doomed:
            del self.sessions[sid]
        return len(doomed)


class DeterministicHasher:
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture(autouse=True)
def _clear_rate_limits() -> Iterator[None]:
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def engine() -> Iterator[Engine]:
    eng = create_db_engine(DatabaseConfig(DATABASE_URL="sqlite://"))
    init_db(eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture()
def session_factory(engine: Engine):
    return make_session_factory(engine)


@pytest.fixture()
def container(engine: Engine, session_factory, clock: FakeClock) -> Container:
    return Container(
        config=load_config(),
        engine=engine,
        session_factory=session_factory,
        password_hasher=DeterministicHasher(),
        clock=clock,
    )


@pytest.fixture()
def app(container: Container) -> Flask:
    flask_app = create_app(container)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client
