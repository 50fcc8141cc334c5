"""
Tag CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Site tag persistence operations
"""

import secrets
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.models.tag_model import TagModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class TagCRUD(BaseCRUD[TagModel]):
    """CRUD operations for TagModel keyed by display name."""

    def __init__(self) -> None:
        """Initialize TagCRUD with TagModel."""
        super().__init__(TagModel)

    async def list_display_names(self, session: AsyncSession) -> list[str]:
        """Display names of all tags, alphabetical."""
        stmt = select(TagModel.display_name).order_by(TagModel.display_name)
        result = await session.execute(stmt)
        return [name for name in result.scalars().all() if name and name.strip()]

    async def get_by_display_names(self, session: AsyncSession, names: list[str]) -> Sequence[TagModel]:
        """Tags whose display name is in names."""
        if not names:
            return []
        stmt = select(TagModel).where(TagModel.display_name.in_(names))
        result = await session.execute(stmt)
        return result.scalars().all()

    async def create_with_display_name(self, session: AsyncSession, display_name: str) -> TagModel:
        """Create a tag with a generated "tag-" slug."""
        return await self.create(
            session, name=f"tag-{secrets.token_hex(4)}", display_name=display_name
        )


tag_crud = TagCRUD()
