"""
Summary ORM model.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: AI summary persistence
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class SummaryModel(Base, UUIDMixin, TimestampMixin):
    """
    AI-generated summary for a post.

    Attributes:
        post_name: Slug of the summarized post
        post_url: Post permalink at generation time
        post_summary: Summary text
    """

    __tablename__ = "summaries"

    post_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    post_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    post_summary: Mapped[str | None] = mapped_column(Text, nullable=True)
