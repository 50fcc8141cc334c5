"""
Generic async CRUD shared by the footprint, post, summary, tag and game
cache repositories.

Repositories subclass BaseCRUD with their model and add the lookups their
service needs (by slug, by post name, by cache key). Methods flush but
never commit: the request session from get_async_db, or the per-post
session of the summary sync, owns the transaction.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from backend.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Repository for one ORM model keyed by its UUID primary key.

    Attributes:
        model: Mapped class this repository reads and writes
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """
        Insert a row and return it with id and timestamps populated.

        Args:
            session: Async database session
            **values: Column values

        Returns:
            ModelT: The refreshed instance
        """
        instance = self.model(**values)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        return await session.get(self.model, id)

    async def get_one_by(self, session: AsyncSession, **filters: Any) -> ModelT | None:
        """First row whose columns equal the given values, or None."""
        result = await session.execute(select(self.model).filter_by(**filters).limit(1))
        return result.scalars().first()

    async def get_all(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
        order_by: ColumnElement[Any] | None = None,
    ) -> Sequence[ModelT]:
        """
        Rows of the model, optionally ordered and paginated.

        Args:
            session: Async database session
            limit: Page size, None for no limit
            offset: Rows to skip
            order_by: Column expression such as Model.created_at.desc()

        Returns:
            Sequence[ModelT]: Matching rows
        """
        stmt = select(self.model)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count(self, session: AsyncSession, **filters: Any) -> int:
        """Number of rows, restricted to equality filters when given."""
        stmt = select(func.count()).select_from(self.model)
        if filters:
            stmt = stmt.filter_by(**filters)
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def update_by_id(self, session: AsyncSession, id: UUID, **values: Any) -> ModelT | None:
        """
        Assign attributes on a loaded row and flush.

        Going through the instance fires the updated_at onupdate hook and
        keeps identity-map copies current.

        Returns:
            ModelT | None: Updated row, or None if the id matched nothing
        """
        instance = await self.get_by_id(session, id)
        if instance is None:
            return None
        for field, value in values.items():
            setattr(instance, field, value)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """Delete a row; False when the id matched nothing."""
        result = await session.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: UUID) -> bool:
        result = await session.execute(select(self.model.id).where(self.model.id == id))
        return result.scalar_one_or_none() is not None
