"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from backend.boundary.db.CRUD import footprint_crud, summary_crud

    # Use singleton instances
    footprint = await footprint_crud.get_by_id(db, footprint_id)

    # Or instantiate classes directly for custom behavior
    from backend.boundary.db.CRUD import FootprintCRUD
    custom_crud = FootprintCRUD()
"""

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.CRUD.footprint_crud import FootprintCRUD, footprint_crud
from backend.boundary.db.CRUD.game_cache_crud import GameCacheCRUD, game_cache_crud
from backend.boundary.db.CRUD.post_crud import PostCRUD, post_crud
from backend.boundary.db.CRUD.summary_crud import SummaryCRUD, summary_crud
from backend.boundary.db.CRUD.tag_crud import TagCRUD, tag_crud

__all__ = [
    "BaseCRUD",
    "FootprintCRUD",
    "footprint_crud",
    "GameCacheCRUD",
    "game_cache_crud",
    "PostCRUD",
    "post_crud",
    "SummaryCRUD",
    "summary_crud",
    "TagCRUD",
    "tag_crud",
]
