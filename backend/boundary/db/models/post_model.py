"""
Post ORM model.

Articles the AI features read from and write summaries back to.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Article persistence for summaries and tags
"""

from sqlalchemy import JSON, Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin

BLACKLIST_ANNOTATION = "summary.xhhao.com/enable-black-list"
MANUAL_SUMMARY_ANNOTATION = "summary.xhhao.com/update-summary"
AI_SUMMARY_UPDATED_ANNOTATION = "summary.lik.cc/ai-summary-updated"


class PostModel(Base, UUIDMixin, TimestampMixin):
    """
    Post ORM model.

    Annotations are string flags keyed by the names above; a post whose
    AI_SUMMARY_UPDATED_ANNOTATION is missing or "false" is pending sync.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Unique slug
        title: Display title
        permalink: Public URL
        content: Raw article body
        excerpt: Current excerpt shown in listings
        excerpt_auto_generate: Whether the excerpt is derived automatically
        annotations: String flags (blacklist, manual summary, sync state)
    """

    __tablename__ = "posts"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True, doc="Slug")
    title: Mapped[str] = mapped_column(String(512), nullable=False, default="", doc="Title")
    permalink: Mapped[str | None] = mapped_column(String(1024), nullable=True, doc="Public URL")
    content: Mapped[str] = mapped_column(Text, nullable=False, default="", doc="Raw body")
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True, doc="Excerpt")
    excerpt_auto_generate: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    annotations: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict, doc="String flags")
