"""
Footprint ORM model.

A footprint is a geotagged journal entry shown as a marker on the map.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Footprint persistence
"""

from datetime import datetime

from sqlalchemy import DateTime, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin, utc_now


class FootprintModel(Base, UUIDMixin, TimestampMixin):
    """
    Footprint ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Place name (100 char limit)
        description: Optional story text (500 char limit)
        longitude: Longitude in degrees, -180..180
        latitude: Latitude in degrees, -90..90
        address: Human-readable address
        footprint_type: Free-form category used for filtering
        image: Cover image URL
        article: Linked article URL
        author: Owner name used for filtering
        create_time: Visit time, used for ordering (defaults to insert time)
    """

    __tablename__ = "footprints"

    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True, doc="Place name")
    description: Mapped[str | None] = mapped_column(String(500), nullable=True, doc="Story text")
    longitude: Mapped[float] = mapped_column(Float, nullable=False, doc="Longitude")
    latitude: Mapped[float] = mapped_column(Float, nullable=False, doc="Latitude")
    address: Mapped[str | None] = mapped_column(String(200), nullable=True, doc="Address")
    footprint_type: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True, doc="Category")
    image: Mapped[str | None] = mapped_column(Text, nullable=True, doc="Image URL")
    article: Mapped[str | None] = mapped_column(Text, nullable=True, doc="Linked article URL")
    author: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True, doc="Owner")
    create_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        index=True,
        doc="Visit time used for ordering",
    )
