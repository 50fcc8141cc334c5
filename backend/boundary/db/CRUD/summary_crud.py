"""
Summary CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: AI summary persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.models.summary_model import SummaryModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class SummaryCRUD(BaseCRUD[SummaryModel]):
    """CRUD operations for SummaryModel with per-post upsert."""

    def __init__(self) -> None:
        """Initialize SummaryCRUD with SummaryModel."""
        super().__init__(SummaryModel)

    async def list_by_post_name(self, session: AsyncSession, post_name: str) -> Sequence[SummaryModel]:
        """
        Summaries recorded for a post that carry text, oldest first.

        Args:
            session: Async database session
            post_name: Post slug

        Returns:
            Sequence of SummaryModel
        """
        stmt = (
            select(SummaryModel)
            .where(SummaryModel.post_name == post_name)
            .where(SummaryModel.post_summary.is_not(None))
            .order_by(SummaryModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def upsert_for_post(
        self,
        session: AsyncSession,
        post_name: str,
        post_url: str | None,
        post_summary: str,
    ) -> SummaryModel:
        """
        Update the first summary of a post, or create one.

        Args:
            session: Async database session
            post_name: Post slug
            post_url: Post permalink
            post_summary: New summary text

        Returns:
            SummaryModel: The stored summary
        """
        stmt = (
            select(SummaryModel)
            .where(SummaryModel.post_name == post_name)
            .order_by(SummaryModel.created_at)
            .limit(1)
        )
        existing = (await session.execute(stmt)).scalars().first()
        if existing is None:
            return await self.create(
                session, post_name=post_name, post_url=post_url, post_summary=post_summary
            )
        existing.post_url = post_url
        existing.post_summary = post_summary
        await session.flush()
        await session.refresh(existing)
        return existing


summary_crud = SummaryCRUD()
