"""
Tag endpoints.

Routes:
- POST /tags/generate - Suggest tags for a post, optionally creating new ones
- GET /tags - Display names of all tags

Dependencies: backend.application.services, backend.models
System role: Tag HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.application.services.tag_service import TagService
from backend.api.deps.dependencies import get_tag_service
from backend.models.tags import GenerateTagsRequest, TagListResponse, TagResponse

from .ai_error_handling import handle_ai_errors
from .ai_validators import AiRequestValidationError, validate_post_name_for_tags
from .ai_responses import map_tag_result_to_response, tag_error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tags", tags=["tags"])


@router.post("/generate", response_model=TagResponse)
@handle_ai_errors
async def generate_tags(
    request: GenerateTagsRequest,
    tag_service: TagService = Depends(get_tag_service),
) -> TagResponse:
    """
    Suggest tags for a post.

    With ensure=true the suggested tags missing from the site are created;
    is_existing still reflects the state before creation.

    Args:
        request: Post name and ensure flag
        tag_service: Injected TagService

    Returns:
        TagResponse: Suggested tags with counts
    """
    try:
        post_name = validate_post_name_for_tags(request.post_name)
    except AiRequestValidationError as e:
        return tag_error_response(str(e))

    logger.info("Tag generation requested", extra={"post_name": post_name, "ensure": request.ensure})
    if request.ensure:
        result = await tag_service.generate_and_ensure(post_name)
    else:
        result = await tag_service.generate_tags(post_name)
    return map_tag_result_to_response(result)


@router.get("", response_model=TagListResponse)
@handle_ai_errors
async def list_tags(
    tag_service: TagService = Depends(get_tag_service),
) -> TagListResponse:
    return TagListResponse(tags=await tag_service.list_tags())
