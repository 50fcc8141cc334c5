"""
Article and title generation schemas.

Dependencies: pydantic
System role: Generation API contracts
"""

from pydantic import BaseModel, Field


class GenerateArticleRequest(BaseModel):
    """Request schema for article generation."""

    topic: str | None = Field(None, description="Article topic")
    format: str = Field("markdown", description="markdown or html")
    style: str = Field("通俗易懂", description="Writing style key or free text")
    type: str = Field("full", description="Generation type")
    max_length: int = Field(2000, description="Approximate length in characters")


class GenerateTitleRequest(BaseModel):
    """Request schema for title generation."""

    content: str | None = Field(None, description="Article body")
    style: str = Field("有利于SEO的标题", description="Title style key or free text")
    count: int | None = Field(None, ge=1, le=20, description="Number of titles")


class GenerateResponse(BaseModel):
    """Generation outcome shared by article and title endpoints."""

    success: bool
    content: str = ""
    message: str
