"""
Polish endpoint.

Routes:
- POST /polish - Rewrite text for clarity and flow

Dependencies: backend.application.services, backend.models
System role: Polish HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.application.services.polish_service import PolishService
from backend.api.deps.dependencies import get_polish_service
from backend.models.polish import PolishRequest, PolishResponse

from .ai_error_handling import handle_ai_errors
from .ai_validators import AiRequestValidationError, validate_polish_content

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/polish", tags=["polish"])


@router.post("", response_model=PolishResponse)
@handle_ai_errors
async def polish(
    request: PolishRequest,
    polish_service: PolishService = Depends(get_polish_service),
) -> PolishResponse:
    try:
        content = validate_polish_content(request.content)
    except AiRequestValidationError as e:
        return PolishResponse.failed(request.content or "", str(e))

    logger.info("Polish requested", extra={"content_length": len(content)})
    return await polish_service.polish(content)
