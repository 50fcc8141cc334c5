"""
Tag ORM model.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Site tag persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class TagModel(Base, UUIDMixin, TimestampMixin):
    """
    Site tag.

    Attributes:
        name: Generated slug ("tag-" plus a random suffix)
        display_name: Visible label, unique
    """

    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    display_name: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
