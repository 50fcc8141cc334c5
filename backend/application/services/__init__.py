"""Service orchestrators."""

from .ai_config_service import AiConfigService
from .conversation_service import ConversationService
from .footprint_service import FootprintService
from .generate_service import GenerateService
from .polish_service import PolishService
from .post_service import PostService
from .steam_service import SteamService
from .summary_service import SummaryService, SummarySyncRunner
from .tag_service import TagService

__all__ = [
    "AiConfigService",
    "ConversationService",
    "FootprintService",
    "GenerateService",
    "PolishService",
    "PostService",
    "SteamService",
    "SummaryService",
    "SummarySyncRunner",
    "TagService",
]
