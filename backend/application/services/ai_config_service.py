"""
AI configuration resolver.

Turns the flat AI settings into a ProviderConfig for one AI function:
the function's own provider type, else the global type, else openAi,
then that provider's credentials and the function's system prompt.

Dependencies: backend.configs.ai, backend.core.ai
System role: Per-function provider configuration
"""

import logging

from backend.configs.ai import AiSettings
from backend.core.ai.base import AiProvider
from backend.core.ai.config import AiFunction, ProviderConfig
from backend.core.ai.factory import AiProviderFactory

logger = logging.getLogger(__name__)

DEFAULT_AI_TYPE = "openAi"

_FUNCTION_TYPE_FIELDS: dict[AiFunction, str] = {
    AiFunction.SUMMARY: "summary_ai_type",
    AiFunction.TAGS: "tag_ai_type",
    AiFunction.CONVERSATION: "assistant_ai_type",
    AiFunction.POLISH: "polish_ai_type",
    AiFunction.GENERATE: "generate_ai_type",
    AiFunction.TITLE: "title_ai_type",
}

_FUNCTION_PROMPT_FIELDS: dict[AiFunction, str] = {
    AiFunction.SUMMARY: "summary_system_prompt",
    AiFunction.TAGS: "tag_generation_prompt",
    AiFunction.CONVERSATION: "conversation_system_prompt",
    AiFunction.POLISH: "polish_system_prompt",
    AiFunction.GENERATE: "generate_system_prompt",
    AiFunction.TITLE: "title_system_prompt",
}


class AiConfigService:
    """Resolves provider configuration and provider instances per AI function."""

    def __init__(self, settings: AiSettings, factory: AiProviderFactory) -> None:
        """
        Initialize resolver.

        Args:
            settings: AI settings group
            factory: Provider registry used to look up the resolved type
        """
        self.settings = settings
        self.factory = factory

    def resolve_ai_type(self, function: AiFunction) -> str:
        """Function type, else global type, else openAi."""
        function_type = getattr(self.settings, _FUNCTION_TYPE_FIELDS[function])
        if function_type and function_type.strip():
            return function_type.strip()
        if self.settings.global_ai_type and self.settings.global_ai_type.strip():
            return self.settings.global_ai_type.strip()
        return DEFAULT_AI_TYPE

    def _credentials(self, ai_type: str) -> tuple[str | None, str | None, str | None]:
        s = self.settings
        key = ai_type.lower()
        if key == "zhipuai":
            return s.zhipu_api_key, s.zhipu_model_name, None
        if key == "dashscope":
            return s.dashscope_api_key, s.dashscope_model_name, None
        if key == "codesphere":
            return s.codesphere_api_key, s.codesphere_model_name, None
        if key == "siliconflow":
            return s.siliconflow_api_key, s.siliconflow_model_name, s.siliconflow_base_url
        return s.openai_api_key, s.openai_model_name, s.openai_base_url

    def get_config(self, function: AiFunction) -> ProviderConfig:
        """
        Build the provider configuration for an AI function.

        Args:
            function: AI feature being invoked

        Returns:
            ProviderConfig: Type, credentials, system prompt and timeout
        """
        ai_type = self.resolve_ai_type(function)
        api_key, model_name, base_url = self._credentials(ai_type)
        system_prompt = getattr(self.settings, _FUNCTION_PROMPT_FIELDS[function])
        logger.debug(
            "Resolved AI config",
            extra={
                "function": function.value,
                "ai_type": ai_type,
                "model": model_name,
                "has_api_key": bool(api_key),
            },
        )
        return ProviderConfig(
            ai_type=ai_type,
            api_key=api_key,
            model_name=model_name,
            base_url=base_url,
            system_prompt=system_prompt,
            timeout_seconds=self.settings.request_timeout_seconds,
        )

    def get_provider(self, function: AiFunction) -> AiProvider:
        """Provider instance for the function's resolved type."""
        return self.factory.get_provider(self.resolve_ai_type(function))
