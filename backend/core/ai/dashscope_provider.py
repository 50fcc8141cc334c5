"""
Alibaba DashScope (Tongyi Qianwen) provider.

DashScope uses its own request shape: a bare prompt or a message list
under `input`, and incremental SSE output enabled through `parameters`.

Dependencies: httpx, backend.core.ai
System role: DashScope vendor integration
"""

from typing import AsyncIterator

from backend.core.ai.base import AiProvider
from backend.core.ai.config import ProviderConfig
from backend.core.ai.response_parsing import (
    enhance_with_system_prompt,
    parse_dashscope_sse_line,
)

DASHSCOPE_API_URL = (
    "https://dashscope.aliyuncs.com/api/v1/services/aigc/text-generation/generation"
)


class DashScopeProvider(AiProvider):
    """DashScope text generation."""

    ai_type = "dashScope"

    def _headers(self, config: ProviderConfig, operation: str, stream: bool = False) -> dict[str, str]:
        api_key = self._require_api_key(config, operation)
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        if stream:
            headers["Accept"] = "text/event-stream"
        return headers

    async def chat(self, prompt: str, config: ProviderConfig) -> str:
        body = {"model": config.model_name, "input": {"prompt": prompt}}
        return await self._post_json(
            DASHSCOPE_API_URL, self._headers(config, "chat"), body, config, "chat"
        )

    async def multi_turn_chat(
        self,
        history: str,
        system_prompt: str | None,
        config: ProviderConfig,
    ) -> str:
        body = {
            "model": config.model_name,
            "input": {"messages": enhance_with_system_prompt(history, system_prompt)},
        }
        return await self._post_json(
            DASHSCOPE_API_URL,
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
            "input": {"messages": enhance_with_system_prompt(history, system_prompt)},
            "parameters": {"incremental_output": True},
        }
        async for chunk in self._stream_lines(
            DASHSCOPE_API_URL,
            self._headers(config, "stream_chat", stream=True),
            body,
            config,
            "stream_chat",
            parse_dashscope_sse_line,
        ):
            yield chunk
