"""
Post schemas.

Local article records the AI features summarize and tag.

Dependencies: pydantic
System role: Post API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CreatePostRequest(BaseModel):
    """Request schema for registering or replacing a post."""

    name: str = Field(..., min_length=1, max_length=255, description="Unique slug")
    title: str = Field("", max_length=512)
    permalink: str | None = Field(None, max_length=1024)
    content: str = Field("", description="Raw article body")
    excerpt: str | None = None
    excerpt_auto_generate: bool = True
    annotations: dict[str, str] = Field(default_factory=dict, description="String flags")


class PostResponse(BaseModel):
    """Response schema for post operations."""

    id: uuid.UUID
    name: str
    title: str
    permalink: str | None
    content: str
    excerpt: str | None
    excerpt_auto_generate: bool
    annotations: dict[str, str]
    created_at: datetime
    updated_at: datetime
