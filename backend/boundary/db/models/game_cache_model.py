"""
Game cache ORM model.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Steam library cache persistence
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin, utc_now


class GameCacheModel(Base, UUIDMixin, TimestampMixin):
    """
    Cached Steam library payload.

    Attributes:
        cache_key: Logical key; the library uses "gamesData"
        payload: Processed library ({games, stats})
        last_updated: When the payload was fetched from Steam
    """

    __tablename__ = "game_cache"

    cache_key: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)
