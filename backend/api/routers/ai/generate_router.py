"""
Content generation endpoints.

Routes:
- POST /generate/article - Generate an article from a topic
- POST /generate/title - Suggest titles for an article

Dependencies: backend.application.services, backend.models
System role: Generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.application.services.generate_service import GenerateService
from backend.api.deps.dependencies import get_generate_service
from backend.models.generate import GenerateArticleRequest, GenerateResponse, GenerateTitleRequest

from .ai_error_handling import handle_ai_errors
from .ai_validators import (
    AiRequestValidationError,
    validate_article_request,
    validate_title_request,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/generate", tags=["generate"])


@router.post("/article", response_model=GenerateResponse)
@handle_ai_errors
async def generate_article(
    request: GenerateArticleRequest,
    generate_service: GenerateService = Depends(get_generate_service),
) -> GenerateResponse:
    """
    Generate an article.

    Invalid input is reported in the body with success=False.

    Args:
        request: Topic, format, style, type and length
        generate_service: Injected GenerateService

    Returns:
        GenerateResponse: Generated article or failure message
    """
    try:
        topic = validate_article_request(request)
    except AiRequestValidationError as e:
        return GenerateResponse(success=False, message=str(e))

    logger.info(
        "Article generation requested",
        extra={"style": request.style, "format": request.format, "max_length": request.max_length},
    )
    return await generate_service.generate_article(
        topic,
        output_format=request.format,
        style=request.style,
        article_type=request.type,
        max_length=request.max_length,
    )


@router.post("/title", response_model=GenerateResponse)
@handle_ai_errors
async def generate_title(
    request: GenerateTitleRequest,
    generate_service: GenerateService = Depends(get_generate_service),
) -> GenerateResponse:
    """Suggest titles, one per line."""
    try:
        content = validate_title_request(request)
    except AiRequestValidationError as e:
        return GenerateResponse(success=False, message=str(e))

    return await generate_service.generate_titles(content, style=request.style, count=request.count)
