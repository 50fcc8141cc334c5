"""
Summary API endpoints.

Routes:
- POST /summaries - Generate and store a summary for a post
- POST /summaries/update-content - Write the stored summary into the excerpt
- POST /summaries/sync-all - Summarize every pending post in the background
- GET /summaries/sync-progress - Progress of the background sync
- GET /summaries/config - Summary box display config
- GET /summaries/{post_name} - Stored summaries of a post

Dependencies: backend.application.services, backend.models
System role: Summary HTTP API
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends

from backend.application.services.conversation_service import ConversationService
from backend.application.services.summary_service import SummaryService, SummarySyncRunner
from backend.api.deps.dependencies import (
    get_conversation_service,
    get_summary_service,
    get_summary_sync_runner,
    get_sync_tracker,
)
from backend.core.sync_tracker import SyncProgressTracker
from backend.models.common import OperationResult
from backend.models.summary import (
    GenerateSummaryRequest,
    GenerateSummaryResponse,
    SummaryBoxConfig,
    SummaryRecord,
    SyncProgress,
    UpdateContentRequest,
    UpdateContentResponse,
)

from .ai_error_handling import handle_ai_errors
from .ai_validators import AiRequestValidationError, validate_post_name_for_update
from .ai_responses import map_summaries_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/summaries", tags=["summaries"])

SYNC_TRIGGERED_MESSAGE = "已异步触发全量摘要同步"


@router.post("", response_model=GenerateSummaryResponse)
@handle_ai_errors
async def generate_summary(
    request: GenerateSummaryRequest,
    summary_service: SummaryService = Depends(get_summary_service),
) -> GenerateSummaryResponse:
    """
    Generate a summary for a post and store it.

    Provider failures come back as success=False; an unknown post is a 404.
    """
    logger.info("Summary generation requested", extra={"post_name": request.post_name})
    return await summary_service.generate_summary(request.post_name)


@router.post("/update-content", response_model=UpdateContentResponse)
@handle_ai_errors
async def update_content(
    request: UpdateContentRequest,
    summary_service: SummaryService = Depends(get_summary_service),
) -> UpdateContentResponse:
    """Copy the stored summary into the post excerpt."""
    try:
        post_name = validate_post_name_for_update(request.post_name)
    except AiRequestValidationError as e:
        return UpdateContentResponse(success=False, message=str(e))

    return await summary_service.update_post_content(post_name)


@router.post("/sync-all", response_model=OperationResult)
@handle_ai_errors
async def sync_all(
    background_tasks: BackgroundTasks,
    runner: SummarySyncRunner = Depends(get_summary_sync_runner),
) -> OperationResult:
    """
    Queue a full summary sync and return immediately.

    Progress is exposed by GET /summaries/sync-progress.
    """
    background_tasks.add_task(runner.run)
    logger.info("Summary sync scheduled")
    return OperationResult(success=True, message=SYNC_TRIGGERED_MESSAGE)


@router.get("/sync-progress", response_model=SyncProgress)
async def sync_progress(
    tracker: SyncProgressTracker = Depends(get_sync_tracker),
) -> SyncProgress:
    return SyncProgress(**tracker.snapshot())


@router.get("/config", response_model=SummaryBoxConfig)
async def summary_box_config(
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> SummaryBoxConfig:
    return conversation_service.get_summary_box_config()


@router.get("/{post_name}", response_model=list[SummaryRecord])
@handle_ai_errors
async def find_summaries(
    post_name: str,
    summary_service: SummaryService = Depends(get_summary_service),
) -> list[SummaryRecord]:
    """
    Stored summaries of a post, newest first.

    Args:
        post_name: Post slug
        summary_service: Injected SummaryService

    Returns:
        list[SummaryRecord]: Possibly empty list
    """
    summaries = await summary_service.find_summaries(post_name)
    return map_summaries_to_response(summaries)
