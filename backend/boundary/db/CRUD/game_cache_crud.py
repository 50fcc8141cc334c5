"""
Game cache CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Steam library cache persistence operations
"""

from datetime import datetime

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.models.game_cache_model import GameCacheModel
from backend.boundary.db.CRUD.base_crud import BaseCRUD


class GameCacheCRUD(BaseCRUD[GameCacheModel]):
    """CRUD operations for GameCacheModel keyed by cache_key."""

    def __init__(self) -> None:
        """Initialize GameCacheCRUD with GameCacheModel."""
        super().__init__(GameCacheModel)

    async def get_by_key(self, session: AsyncSession, cache_key: str) -> GameCacheModel | None:
        return await self.get_one_by(session, cache_key=cache_key)

    async def upsert(
        self,
        session: AsyncSession,
        cache_key: str,
        payload: dict,
        last_updated: datetime,
    ) -> GameCacheModel:
        """
        Store a payload under a key, replacing any previous entry.

        Args:
            session: Async database session
            cache_key: Logical key
            payload: JSON-serializable payload
            last_updated: Fetch time

        Returns:
            GameCacheModel: Stored entry
        """
        entry = await self.get_by_key(session, cache_key)
        if entry is None:
            return await self.create(
                session, cache_key=cache_key, payload=payload, last_updated=last_updated
            )
        entry.payload = payload
        entry.last_updated = last_updated
        await session.flush()
        await session.refresh(entry)
        return entry

    async def delete_by_key(self, session: AsyncSession, cache_key: str) -> bool:
        """Remove a cache entry; False when nothing was stored."""
        result = await session.execute(
            delete(GameCacheModel).where(GameCacheModel.cache_key == cache_key)
        )
        return result.rowcount > 0


game_cache_crud = GameCacheCRUD()
