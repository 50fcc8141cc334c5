"""
Summary schemas.

Request/response models for AI summary generation, excerpt write-back,
full sync and the summary box display config.

Dependencies: pydantic
System role: Summary API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class GenerateSummaryRequest(BaseModel):
    """Generate (and store) a summary for the named post."""

    post_name: str = Field(..., min_length=1, description="Post slug")


class GenerateSummaryResponse(BaseModel):
    """
    Summary generation outcome.

    Attributes:
        success: Whether a summary was produced and stored
        message: Status text
        summary: Generated text (empty on failure)
    """

    success: bool
    message: str
    summary: str = ""


class SummaryRecord(BaseModel):
    """Stored summary row."""

    id: uuid.UUID
    post_name: str
    post_url: str | None
    post_summary: str | None
    created_at: datetime
    updated_at: datetime


class UpdateContentRequest(BaseModel):
    """Write the stored summary of a post back into its excerpt."""

    post_name: str | None = Field(None, description="Post slug")


class UpdateContentResponse(BaseModel):
    """Excerpt write-back outcome."""

    success: bool
    message: str
    summary_content: str = ""
    black_list: bool = False


class SyncProgress(BaseModel):
    """Progress of the background full summary sync."""

    total: int = 0
    finished: int = 0


class SummaryBoxConfig(BaseModel):
    """Display settings for the summary box widget."""

    logo: str
    summary_title: str
    gpt_name: str
    type_speed: int
    dark_selector: str
    theme_name: str
    theme: str = Field(..., description="JSON object of theme colours")
    typewriter: bool
