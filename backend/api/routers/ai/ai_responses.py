"""
AI suite response mapping utilities.

Dependencies: backend.models
System role: AI response transformation
"""

from typing import Any

from backend.models.post import PostResponse
from backend.models.summary import SummaryRecord
from backend.models.tags import TagGenerationResult, TagResponse


def map_summary_to_response(summary_data: dict[str, Any]) -> SummaryRecord:
    return SummaryRecord(**summary_data)


def map_summaries_to_response(summaries_data: list[dict[str, Any]]) -> list[SummaryRecord]:
    return [map_summary_to_response(s) for s in summaries_data]


def map_post_to_response(post_data: dict[str, Any]) -> PostResponse:
    """
    Transform post data dictionary into PostResponse.

    Args:
        post_data: Dictionary as returned by PostService

    Returns:
        PostResponse: Pydantic model for API response
    """
    return PostResponse(**post_data)


def map_posts_to_response(posts_data: list[dict[str, Any]]) -> list[PostResponse]:
    return [map_post_to_response(p) for p in posts_data]


def map_tag_result_to_response(result: TagGenerationResult) -> TagResponse:
    """Wrap a generation result as a successful tag response."""
    return TagResponse(success=True, message="success", **result.model_dump())


def tag_error_response(message: str) -> TagResponse:
    return TagResponse(success=False, message=message)
