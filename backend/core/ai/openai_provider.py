"""
OpenAI-compatible chat completions provider.

Also serves the `codesphere` and `siliconFlow` type keys, which speak the
same protocol against different base URLs.

Dependencies: httpx, backend.core.ai
System role: OpenAI / OpenAI-compatible vendor integration
"""

from typing import AsyncIterator

from backend.core.ai.base import AiProvider
from backend.core.ai.config import ProviderConfig
from backend.core.ai.response_parsing import build_messages, parse_openai_sse_line

DEFAULT_OPENAI_URL = "https://api.openai.com/v1/chat/completions"
CODESPHERE_BASE_URL = "https://api.master-jsx.top"
SILICONFLOW_BASE_URL = "https://api.siliconflow.cn"
COMPLETIONS_PATH = "/v1/chat/completions"


def build_api_url(base_url: str | None) -> str:
    """
    Build the chat completions URL from a base URL.

    Trailing slashes are removed and the completions path is appended
    unless already present. A blank base means the public OpenAI API.

    Args:
        base_url: Vendor base URL

    Returns:
        str: Full completions endpoint URL
    """
    if not base_url or not base_url.strip():
        return DEFAULT_OPENAI_URL
    url = base_url.strip().rstrip("/")
    if url.endswith(COMPLETIONS_PATH):
        return url
    return url + COMPLETIONS_PATH


def resolve_base_url(config: ProviderConfig) -> str | None:
    """Pick the base URL for the configured OpenAI-compatible vendor."""
    ai_type = (config.ai_type or "").lower()
    if ai_type == "codesphere":
        return CODESPHERE_BASE_URL
    if ai_type == "siliconflow":
        return config.base_url or SILICONFLOW_BASE_URL
    return config.base_url


class OpenAiProvider(AiProvider):
    """OpenAI chat completions over HTTP with bearer authentication."""

    ai_type = "openAi"

    def _headers(self, config: ProviderConfig, operation: str) -> dict[str, str]:
        api_key = self._require_api_key(config, operation)
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    async def chat(self, prompt: str, config: ProviderConfig) -> str:
        headers = self._headers(config, "chat")
        body = {
            "model": config.model_name,
            "messages": [{"role": "user", "content": prompt}],
        }
        url = build_api_url(resolve_base_url(config))
        return await self._post_json(url, headers, body, config, "chat")

    async def multi_turn_chat(
        self,
        history: str,
        system_prompt: str | None,
        config: ProviderConfig,
    ) -> str:
        headers = self._headers(config, "multi_turn_chat")
        body = {
            "model": config.model_name,
            "messages": build_messages(history, system_prompt),
        }
        url = build_api_url(resolve_base_url(config))
        return await self._post_json(url, headers, body, config, "multi_turn_chat")

    async def stream_chat(
        self,
        history: str,
        system_prompt: str | None,
        config: ProviderConfig,
    ) -> AsyncIterator[str]:
        headers = self._headers(config, "stream_chat")
        body = {
            "model": config.model_name,
            "messages": build_messages(history, system_prompt),
            "stream": True,
        }
        url = build_api_url(resolve_base_url(config))
        async for chunk in self._stream_lines(
            url, headers, body, config, "stream_chat", parse_openai_sse_line
        ):
            yield chunk
