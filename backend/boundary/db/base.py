"""
Declarative base and the id/timestamp mixins every table uses.

The same models run on PostgreSQL (asyncpg) in production and on SQLite
(aiosqlite) in tests, so column types stay on the portable generics.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """
    Attach UTC to naive datetimes.

    SQLite drops tzinfo on round trip; PostgreSQL keeps it. The Steam cache
    age check and footprint ordering compare against aware datetimes.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Base(DeclarativeBase):
    """Registry for footprint, post, summary, tag and game cache tables."""


class UUIDMixin:
    """
    UUID v4 primary key generated client-side.

    Native UUID on PostgreSQL, CHAR(32) on SQLite.
    """

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    """
    created_at set once on insert; updated_at refreshed by the ORM on update.

    Both are timezone-aware UTC. Bulk UPDATE statements bypass onupdate, so
    repositories update through loaded instances.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )
