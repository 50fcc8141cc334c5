"""
Post endpoints.

Posts are the articles the summary and tag features work on.

Routes:
- POST /posts - Create or replace a post by slug
- GET /posts - List posts
- GET /posts/{name} - Get a post

Dependencies: backend.application.services, backend.models
System role: Post HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backend.application.services.post_service import PostService
from backend.api.deps.dependencies import get_post_service
from backend.models.post import CreatePostRequest, PostResponse

from .ai_error_handling import handle_ai_errors
from .ai_validators import AiRequestValidationError, validate_post_creation
from .ai_responses import map_post_to_response, map_posts_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("", response_model=PostResponse)
@handle_ai_errors
async def upsert_post(
    request: CreatePostRequest,
    post_service: PostService = Depends(get_post_service),
) -> PostResponse:
    """
    Create a post, or replace the post with the same slug.

    Raises:
        HTTPException: 400 if the slug or an annotation key is blank
    """
    try:
        validate_post_creation(request)
    except AiRequestValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    post = await post_service.upsert_post(
        name=request.name.strip(),
        title=request.title,
        permalink=request.permalink,
        content=request.content,
        excerpt=request.excerpt,
        excerpt_auto_generate=request.excerpt_auto_generate,
        annotations=request.annotations,
    )
    return map_post_to_response(post)


@router.get("", response_model=list[PostResponse])
@handle_ai_errors
async def list_posts(
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    post_service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    posts = await post_service.list_posts(limit=limit, offset=offset)
    return map_posts_to_response(posts)


@router.get("/{name}", response_model=PostResponse)
@handle_ai_errors
async def get_post(
    name: str,
    post_service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = await post_service.get_post(name)
    return map_post_to_response(post)
