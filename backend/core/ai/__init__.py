"""
LLM provider abstraction.

Exports:
  - AiProvider: Base class for vendor integrations
  - OpenAiProvider, ZhipuAiProvider, DashScopeProvider: Vendor implementations
  - AiProviderFactory: Type-key dispatch with fallback
  - ProviderConfig, AiFunction: Configuration schemas
  - extract_content: Vendor-neutral reply text extraction
"""

from backend.core.ai.base import AiProvider
from backend.core.ai.config import AiFunction, ProviderConfig
from backend.core.ai.dashscope_provider import DashScopeProvider
from backend.core.ai.factory import AiProviderFactory
from backend.core.ai.openai_provider import OpenAiProvider
from backend.core.ai.response_parsing import extract_content
from backend.core.ai.zhipu_provider import ZhipuAiProvider

__all__ = [
    "AiProvider",
    "AiFunction",
    "ProviderConfig",
    "OpenAiProvider",
    "ZhipuAiProvider",
    "DashScopeProvider",
    "AiProviderFactory",
    "extract_content",
]
