"""
Post CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Article persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.models.post_model import AI_SUMMARY_UPDATED_ANNOTATION, PostModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class PostCRUD(BaseCRUD[PostModel]):
    """CRUD operations for PostModel keyed by slug."""

    def __init__(self) -> None:
        """Initialize PostCRUD with PostModel."""
        super().__init__(PostModel)

    async def get_by_name(self, session: AsyncSession, name: str) -> PostModel | None:
        """
        Retrieve a post by slug.

        Args:
            session: Async database session
            name: Post slug

        Returns:
            PostModel if found, None otherwise
        """
        return await self.get_one_by(session, name=name)

    async def list_recent(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[PostModel]:
        """Posts ordered by creation time, newest first."""
        stmt = select(PostModel).order_by(PostModel.created_at.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_pending_summary_sync(self, session: AsyncSession) -> list[PostModel]:
        """
        Posts whose AI summary has not been written back yet.

        Filtering happens in Python because JSON path predicates differ
        between PostgreSQL and SQLite.

        Returns:
            list[PostModel]: Posts without a "true" ai-summary-updated flag
        """
        result = await session.execute(select(PostModel).order_by(PostModel.created_at))
        return [
            post
            for post in result.scalars().all()
            if (post.annotations or {}).get(AI_SUMMARY_UPDATED_ANNOTATION, "false") == "false"
        ]


post_crud = PostCRUD()
