"""
Database models package.

Exports:
  - FootprintModel: Geotagged journal entries
  - PostModel: Articles read by the AI features
  - SummaryModel: AI summaries per post
  - TagModel: Site tags
  - GameCacheModel: Cached Steam library

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from backend.boundary.db.models.footprint_model import FootprintModel
from backend.boundary.db.models.game_cache_model import GameCacheModel
from backend.boundary.db.models.post_model import (
    AI_SUMMARY_UPDATED_ANNOTATION,
    BLACKLIST_ANNOTATION,
    MANUAL_SUMMARY_ANNOTATION,
    PostModel,
)
from backend.boundary.db.models.summary_model import SummaryModel
from backend.boundary.db.models.tag_model import TagModel

__all__ = [
    "FootprintModel",
    "GameCacheModel",
    "PostModel",
    "SummaryModel",
    "TagModel",
    "AI_SUMMARY_UPDATED_ANNOTATION",
    "BLACKLIST_ANNOTATION",
    "MANUAL_SUMMARY_ANNOTATION",
]
