"""
Summary service orchestrator.

Generates AI summaries for posts, stores them, writes them back into post
excerpts and drives the background full sync.

Dependencies: backend.boundary.db, backend.core.ai, backend.core.sync_tracker
System role: Summary use case orchestration
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backend.application.services.ai_config_service import AiConfigService
from backend.boundary.db.CRUD.post_crud import post_crud
from backend.boundary.db.CRUD.summary_crud import summary_crud
from backend.boundary.db.models.post_model import (
    AI_SUMMARY_UPDATED_ANNOTATION,
    BLACKLIST_ANNOTATION,
    MANUAL_SUMMARY_ANNOTATION,
)
from backend.core.ai.config import AiFunction
from backend.core.ai.prompts import build_summary_prompt
from backend.core.ai.response_parsing import extract_content
from backend.core.exceptions import AiProviderError
from backend.core.sync_tracker import SyncProgressTracker
from backend.models.summary import GenerateSummaryResponse, UpdateContentResponse

logger = logging.getLogger(__name__)

SUMMARY_ERROR_PREFIX = "文章摘要生成异常："
NO_SUMMARY_MESSAGE = "未找到摘要内容"


def _flag(annotations: dict | None, key: str) -> bool:
    return str((annotations or {}).get(key, "false")).strip().lower() == "true"


class SummaryService:
    """Summary service orchestrator."""

    def __init__(self, db: AsyncSession, ai_config: AiConfigService) -> None:
        """
        Initialize summary service.

        Args:
            db: Async SQLAlchemy session
            ai_config: Provider resolver for the summary function
        """
        self.db = db
        self.ai_config = ai_config

    async def generate_summary(self, post_name: str) -> GenerateSummaryResponse:
        """
        Generate a summary for a post and store it.

        Provider failures are reported in the result and nothing is stored.

        Args:
            post_name: Post slug

        Returns:
            GenerateSummaryResponse: Outcome with the summary text

        Raises:
            ValueError: If the post does not exist
        """
        post = await post_crud.get_by_name(self.db, post_name)
        if post is None:
            raise ValueError(f"Post {post_name} does not exist")

        config = self.ai_config.get_config(AiFunction.SUMMARY)
        provider = self.ai_config.get_provider(AiFunction.SUMMARY)
        prompt = build_summary_prompt(post.content or "", config.system_prompt)

        logger.info(
            "Generating summary",
            extra={"post_name": post_name, "ai_type": config.ai_type, "content_length": len(post.content or "")},
        )
        try:
            raw = await provider.chat(prompt, config)
        except AiProviderError as e:
            logger.error(
                "Summary generation failed",
                extra={"post_name": post_name, "error": str(e)},
            )
            return GenerateSummaryResponse(success=False, message=f"{SUMMARY_ERROR_PREFIX}{e.message}")

        summary = extract_content(raw) or ""
        await summary_crud.upsert_for_post(
            self.db, post_name=post_name, post_url=post.permalink, post_summary=summary
        )
        logger.info("Summary stored", extra={"post_name": post_name, "summary_length": len(summary)})
        return GenerateSummaryResponse(success=True, message="摘要生成成功", summary=summary)

    async def find_summaries(self, post_name: str) -> list[dict]:
        """
        Stored summaries of a post.

        Args:
            post_name: Post slug

        Returns:
            list[dict]: Summary rows (empty when none)
        """
        rows = await summary_crud.list_by_post_name(self.db, post_name)
        return [
            {
                "id": row.id,
                "post_name": row.post_name,
                "post_url": row.post_url,
                "post_summary": row.post_summary,
                "created_at": row.created_at,
                "updated_at": row.updated_at,
            }
            for row in rows
        ]

    async def update_post_content(self, post_name: str) -> UpdateContentResponse:
        """
        Copy the stored summary into the post excerpt.

        Skips blacklisted posts, posts with a manual summary and posts whose
        excerpt already matches. On success the excerpt stops being
        auto-generated and the post is flagged as AI-updated.

        Args:
            post_name: Post slug (already trimmed and non-blank)

        Returns:
            UpdateContentResponse: Outcome, with the summary text when found
        """
        summaries = await summary_crud.list_by_post_name(self.db, post_name)
        if not summaries:
            logger.info("No summary to write back", extra={"post_name": post_name})
            return UpdateContentResponse(
                success=False, message=NO_SUMMARY_MESSAGE, summary_content=NO_SUMMARY_MESSAGE
            )
        summary_content = summaries[0].post_summary or ""

        post = await post_crud.get_by_name(self.db, post_name)
        if post is None:
            return UpdateContentResponse(
                success=False,
                message=f"更新文章摘要时发生错误: Post {post_name} does not exist",
                summary_content=summary_content,
            )

        annotations = dict(post.annotations or {})
        if _flag(annotations, BLACKLIST_ANNOTATION):
            logger.info("Post is blacklisted, skipping excerpt update", extra={"post_name": post_name})
            return UpdateContentResponse(
                success=False,
                message="文章在黑名单中，不进行摘要更新",
                summary_content=summary_content,
                black_list=True,
            )
        if _flag(annotations, MANUAL_SUMMARY_ANNOTATION):
            logger.info("Post has a manual summary, skipping", extra={"post_name": post_name})
            return UpdateContentResponse(
                success=False,
                message="文章已手动更新摘要，跳过AI更新",
                summary_content=summary_content,
            )
        if post.excerpt == summary_content:
            return UpdateContentResponse(
                success=False,
                message="摘要内容未发生变化，无需更新",
                summary_content=summary_content,
            )

        annotations[AI_SUMMARY_UPDATED_ANNOTATION] = "true"
        await post_crud.update_by_id(
            self.db,
            post.id,
            excerpt=summary_content,
            excerpt_auto_generate=False,
            annotations=annotations,
        )
        logger.info("Summary written to post excerpt", extra={"post_name": post_name})
        return UpdateContentResponse(success=True, message="成功", summary_content=summary_content)


class SummarySyncRunner:
    """
    Background full summary sync.

    Summarizes every post not yet flagged as AI-updated, a bounded number
    at a time, each in its own session so one failure does not roll back
    the others.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        ai_config: AiConfigService,
        tracker: SyncProgressTracker,
        concurrency: int = 3,
    ) -> None:
        """
        Initialize sync runner.

        Args:
            session_factory: Factory for per-post sessions
            ai_config: Provider resolver shared with SummaryService
            tracker: Progress counters exposed by the progress endpoint
            concurrency: Posts summarized in parallel
        """
        self.session_factory = session_factory
        self.ai_config = ai_config
        self.tracker = tracker
        self.concurrency = concurrency

    async def _pending_post_names(self) -> list[str]:
        async with self.session_factory() as session:
            posts = await post_crud.list_pending_summary_sync(session)
            return [post.name for post in posts]

    async def _summarize_one(self, post_name: str, semaphore: asyncio.Semaphore) -> None:
        async with semaphore:
            logger.info("Summary sync started for post", extra={"post_name": post_name})
            try:
                async with self.session_factory() as session:
                    result = await SummaryService(session, self.ai_config).generate_summary(post_name)
                    await session.commit()
                if not result.success:
                    logger.warning(
                        "Summary sync produced no summary",
                        extra={"post_name": post_name, "error": result.message},
                    )
            except Exception as e:
                logger.error(
                    "Summary sync failed for post",
                    extra={"post_name": post_name, "error": str(e)},
                )
            finally:
                await self.tracker.mark_finished()

    async def run(self) -> dict[str, int]:
        """
        Summarize all pending posts.

        Returns:
            dict[str, int]: Final progress {total, finished}
        """
        names = await self._pending_post_names()
        await self.tracker.start(len(names))
        logger.info("Summary sync queued", extra={"total": len(names), "concurrency": self.concurrency})

        semaphore = asyncio.Semaphore(self.concurrency)
        await asyncio.gather(*(self._summarize_one(name, semaphore) for name in names))

        logger.info("Summary sync completed", extra=self.tracker.snapshot())
        return self.tracker.snapshot()
