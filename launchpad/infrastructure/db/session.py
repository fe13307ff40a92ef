# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from launchpad.shared.config import load_config
from launchpad.shared.config.settings import DatabaseConfig
from launchpad.shared.logging import logger

_config = load_config()


class Base(DeclarativeBase):
    pass


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def create_db_engine(config: DatabaseConfig) -> Engine:
    url = config.url
    if _is_memory_sqlite(url):
        engine = create_engine(
            url,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        connect_args: dict[str, object] = {}
        if url.startswith("sqlite"):
            connect_args = {
                "check_same_thread": False,
                "timeout": int(config.pool_timeout),
            }
        engine = create_engine(
            url,
            echo=False,
            future=True,
            pool_pre_ping=True,
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
            connect_args=connect_args,
        )

    if url.startswith("sqlite"):
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, _record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


ENGINE: Engine = create_db_engine(_config.database)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(engine: Engine | None = None) -> None:
    # models must be registered on Base.metadata before create_all
    from launchpad.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine or ENGINE)
    logger.info("Database schema ensured")
