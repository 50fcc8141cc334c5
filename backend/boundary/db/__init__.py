"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - dispose_engine(): Shutdown helper
  - FootprintModel, PostModel, SummaryModel, TagModel, GameCacheModel: Domain entities
  - footprint_crud, post_crud, summary_crud, tag_crud, game_cache_crud: CRUD operation singletons

Dependencies: sqlalchemy, backend.configs
System role: Database adapter providing persistent storage for footprints,
articles, summaries, tags and the Steam game cache.
"""

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin
from backend.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from backend.boundary.db.models import (
    FootprintModel,
    GameCacheModel,
    PostModel,
    SummaryModel,
    TagModel,
)
from backend.boundary.db.CRUD import (
    BaseCRUD,
    FootprintCRUD,
    GameCacheCRUD,
    PostCRUD,
    SummaryCRUD,
    TagCRUD,
    footprint_crud,
    game_cache_crud,
    post_crud,
    summary_crud,
    tag_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "FootprintModel",
    "GameCacheModel",
    "PostModel",
    "SummaryModel",
    "TagModel",
    # CRUD classes
    "BaseCRUD",
    "FootprintCRUD",
    "GameCacheCRUD",
    "PostCRUD",
    "SummaryCRUD",
    "TagCRUD",
    # CRUD singletons
    "footprint_crud",
    "game_cache_crud",
    "post_crud",
    "summary_crud",
    "tag_crud",
]
