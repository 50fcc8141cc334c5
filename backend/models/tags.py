"""
Tag generation schemas.

Dependencies: pydantic
System role: Tag API contracts
"""

from pydantic import BaseModel, Field


class GenerateTagsRequest(BaseModel):
    """Generate tags for a post, optionally creating the missing ones."""

    post_name: str | None = Field(None, description="Post slug")
    ensure: bool = Field(False, description="Create tags that do not exist yet")


class TagItem(BaseModel):
    """One suggested tag and whether the site already has it."""

    name: str
    is_existing: bool


class TagGenerationResult(BaseModel):
    """Suggested tags with source counts."""

    tags: list[TagItem] = Field(default_factory=list)
    total_count: int = 0
    existing_count: int = 0
    new_count: int = 0

    @classmethod
    def empty(cls) -> "TagGenerationResult":
        return cls()


class TagResponse(TagGenerationResult):
    """Tag endpoint response."""

    success: bool
    message: str


class TagListResponse(BaseModel):
    """Display names of every tag on the site."""

    tags: list[str]
