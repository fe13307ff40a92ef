# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from datetime import UTC, datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from launchpad.infrastructure.db.session import Base


class User(Base):
    __tablename__ = "users"
    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    # stored lowercased; uniqueness is case-insensitive by construction
    username: Mapped[str] = mapped_column(String(31), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(256))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC)
    )
    sessions: Mapped[list["Session"]] = relationship(
        "Session", back_populates="user", cascade="all,delete", passive_deletes=True
    )


class Session(Base):
    __tablename__ = "sessions"
    # sha256 hex of the raw token
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    user: Mapped["User"] = relationship("User", back_populates="sessions")
