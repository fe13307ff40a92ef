# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import Session, SessionContext, User

__all__ = ["Session", "SessionContext", "User"]
