"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, backend.configs
System role: Database schema initialization

Usage:
    python -m backend.boundary.db.create_tables
"""

import asyncio
import logging

from backend.boundary.db.base import Base
from backend.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from backend.boundary.db.models.footprint_model import FootprintModel  # noqa: F401
from backend.boundary.db.models.game_cache_model import GameCacheModel  # noqa: F401
from backend.boundary.db.models.post_model import PostModel  # noqa: F401
from backend.boundary.db.models.summary_model import SummaryModel  # noqa: F401
from backend.boundary.db.models.tag_model import TagModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged, so this also runs on
    every application startup when DatabaseSettings.create_tables is set.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All database tables dropped")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(create_all_tables())
