"""
Conversation endpoints.

Routes:
- POST /conversation - Multi-turn chat, full reply
- POST /conversation/stream - Multi-turn chat as Server-Sent Events
- GET /conversation/dialog-config - Assistant dialog widget settings

Dependencies: backend.application.services, backend.models
System role: Conversation HTTP API
"""

import logging
from typing import AsyncIterator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from backend.application.services.conversation_service import ConversationService
from backend.api.deps.dependencies import get_conversation_service
from backend.models.conversation import ConversationRequest, ConversationResponse, DialogConfig
from backend.models.streaming import StreamEvent

from .ai_error_handling import handle_ai_errors
from .ai_validators import AiRequestValidationError, validate_conversation_history

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/conversation", tags=["conversation"])

SSE_HEADERS = {"Cache-Control": "no-cache", "X-Accel-Buffering": "no"}


@router.post("", response_model=ConversationResponse)
@handle_ai_errors
async def conversation(
    request: ConversationRequest,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> ConversationResponse:
    """
    Continue a conversation.

    Args:
        request: JSON message array or plain text
        conversation_service: Injected ConversationService

    Returns:
        ConversationResponse: Assistant reply or failure message
    """
    try:
        history = validate_conversation_history(request.conversation_history)
    except AiRequestValidationError as e:
        return ConversationResponse(success=False, message=str(e))

    return await conversation_service.chat(history)


@router.post("/stream")
async def conversation_stream(
    request: ConversationRequest,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> StreamingResponse:
    """
    Stream a conversation reply as Server-Sent Events.

    Emits token events, then one complete event with the full answer.
    Failures, including invalid input, end the stream with an error event.
    """
    async def event_generator() -> AsyncIterator[str]:
        try:
            history = validate_conversation_history(request.conversation_history)
        except AiRequestValidationError as e:
            yield StreamEvent.error(str(e)).to_sse()
            return

        async for event in conversation_service.stream_chat(history):
            yield event.to_sse()

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


@router.get("/dialog-config", response_model=DialogConfig)
async def dialog_config(
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> DialogConfig:
    return conversation_service.get_dialog_config()
