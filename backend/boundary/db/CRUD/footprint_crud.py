"""
Footprint CRUD operations.

Provides Create, Read, Update, Delete operations for FootprintModel
with filtered, newest-first listing.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Footprint persistence operations
"""

from typing import Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.models.footprint_model import FootprintModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class FootprintCRUD(BaseCRUD[FootprintModel]):
    """
    CRUD operations for FootprintModel.

    Extends BaseCRUD with keyword/type/author filtering and ordering by
    create_time descending.
    """

    def __init__(self) -> None:
        """Initialize FootprintCRUD with FootprintModel."""
        super().__init__(FootprintModel)

    @staticmethod
    def _apply_filters(
        stmt: Select,
        keyword: str | None,
        footprint_type: str | None,
        author: str | None,
    ) -> Select:
        if keyword:
            stmt = stmt.where(FootprintModel.name.contains(keyword, autoescape=True))
        if footprint_type:
            stmt = stmt.where(FootprintModel.footprint_type == footprint_type)
        if author:
            stmt = stmt.where(FootprintModel.author == author)
        return stmt

    async def list_filtered(
        self,
        session: AsyncSession,
        keyword: str | None = None,
        footprint_type: str | None = None,
        author: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[FootprintModel]:
        """
        List footprints matching optional filters, newest first.

        Args:
            session: Async database session
            keyword: Substring of the name
            footprint_type: Exact category
            author: Exact owner
            limit: Maximum rows (None for all)
            offset: Rows to skip

        Returns:
            Sequence of FootprintModel
        """
        stmt = self._apply_filters(select(FootprintModel), keyword, footprint_type, author)
        stmt = stmt.order_by(FootprintModel.create_time.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_filtered(
        self,
        session: AsyncSession,
        keyword: str | None = None,
        footprint_type: str | None = None,
        author: str | None = None,
    ) -> int:
        """Count footprints matching the same filters as list_filtered."""
        stmt = self._apply_filters(
            select(func.count()).select_from(FootprintModel), keyword, footprint_type, author
        )
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def list_by_name(self, session: AsyncSession, name: str) -> Sequence[FootprintModel]:
        """All footprints with exactly this name, newest first."""
        stmt = (
            select(FootprintModel)
            .where(FootprintModel.name == name)
            .order_by(FootprintModel.create_time.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


footprint_crud = FootprintCRUD()
