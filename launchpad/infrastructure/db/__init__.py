# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import (
    ENGINE,
    Base,
    create_db_engine,
    init_db,
    make_session_factory,
)

__all__ = [
    "Base",
    "ENGINE",
    "create_db_engine",
    "init_db",
    "make_session_factory",
]
