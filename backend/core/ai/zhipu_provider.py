"""
Zhipu AI (BigModel) provider.

Uses the OpenAI-shaped v4 chat completions API at a fixed endpoint.

Dependencies: httpx, backend.core.ai
System role: Zhipu vendor integration
"""

from typing import AsyncIterator

from backend.core.ai.base import AiProvider
from backend.core.ai.config import ProviderConfig
from backend.core.ai.response_parsing import build_messages, parse_openai_sse_line

ZHIPU_API_URL = "https://open.bigmodel.cn/api/paas/v4/chat/completions"


class ZhipuAiProvider(AiProvider):
    """Zhipu GLM chat completions."""

    ai_type = "zhipuAi"

    def _headers(self, config: ProviderConfig, operation: str) -> dict[str, str]:
        api_key = self._require_api_key(config, operation)
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    async def chat(self, prompt: str, config: ProviderConfig) -> str:
        body = {
            "model": config.model_name,
            "messages": [{"role": "user", "content": prompt}],
        }
        return await self._post_json(
            ZHIPU_API_URL, self._headers(config, "chat"), body, config, "chat"
        )

    async def multi_turn_chat(
        self,
        history: str,
        system_prompt: str | None,
        config: ProviderConfig,
    ) -> str:
        body = {
            "model": config.model_name,
            "messages": build_messages(history, system_prompt),
        }
        return await self._post_json(
            ZHIPU_API_URL,
            self._headers(config, "multi_turn_chat"),
            body,
            config,
            "multi_turn_chat",
        )

    async def stream_chat(
        self,
        history: str,
        system_prompt: str | None,
        config: ProviderConfig,
    ) -> AsyncIterator[str]:
        body = {
            "model": config.model_name,
            "messages": build_messages(history, system_prompt),
            "stream": True,
        }
        async for chunk in self._stream_lines(
            ZHIPU_API_URL,
            self._headers(config, "stream_chat"),
            body,
            config,
            "stream_chat",
            parse_openai_sse_line,
        ):
            yield chunk
