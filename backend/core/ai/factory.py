"""
Provider factory.

Maps a configured type key to a provider instance. OpenAI-compatible
aliases resolve to the OpenAI provider; unknown keys fall back to the
first registered provider.

Dependencies: httpx, backend.core.ai providers
System role: Provider selection by type key
"""

import logging

import httpx

from backend.core.ai.base import AiProvider
from backend.core.ai.dashscope_provider import DashScopeProvider
from backend.core.ai.openai_provider import OpenAiProvider
from backend.core.ai.zhipu_provider import ZhipuAiProvider

logger = logging.getLogger(__name__)

OPENAI_COMPATIBLE_ALIASES = frozenset({"codesphere", "siliconflow"})


class AiProviderFactory:
    """Registry of provider instances keyed by type."""

    def __init__(self, providers: list[AiProvider]) -> None:
        """
        Initialize factory with providers in registration order.

        Args:
            providers: Provider instances; the first is the fallback

        Raises:
            ValueError: If no providers are given
        """
        if not providers:
            raise ValueError("At least one AI provider must be registered")
        self._providers: dict[str, AiProvider] = {}
        for provider in providers:
            self._providers.setdefault(provider.ai_type, provider)
        self._default = providers[0]

    @classmethod
    def with_default_providers(cls, client: httpx.AsyncClient) -> "AiProviderFactory":
        """Build a factory holding the OpenAI, Zhipu and DashScope providers."""
        return cls(
            [
                OpenAiProvider(client),
                ZhipuAiProvider(client),
                DashScopeProvider(client),
            ]
        )

    @property
    def registered_types(self) -> list[str]:
        return list(self._providers)

    def get_provider(self, ai_type: str | None) -> AiProvider:
        """
        Return the provider for a type key.

        Args:
            ai_type: Configured type key

        Returns:
            AiProvider: Matching provider, or the first registered one
        """
        key = ai_type or ""
        if key.lower() in OPENAI_COMPATIBLE_ALIASES:
            key = OpenAiProvider.ai_type
        provider = self._providers.get(key)
        if provider is None:
            logger.warning(
                "Unknown AI provider type, using default",
                extra={"ai_type": ai_type, "default": self._default.ai_type},
            )
            return self._default
        return provider
