"""
LLM provider abstraction.

Every vendor integration subclasses AiProvider and implements three calls:
a single-prompt completion, a multi-turn completion and a streaming
multi-turn completion. Transport concerns (timeouts, status handling,
error translation, SSE line iteration) live here so vendor classes only
describe URLs, headers and request bodies.

Dependencies: httpx, backend.core.ai.config, backend.core.exceptions
System role: Provider interface and shared HTTP transport
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Callable

import httpx

from backend.core.ai.config import ProviderConfig
from backend.core.exceptions import AiProviderError
from backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

LineParser = Callable[[str], tuple[str | None, bool]]

_ERROR_BODY_LIMIT = 500


class AiProvider(ABC):
    """
    Base class for LLM vendor integrations.

    Attributes:
        ai_type: Registry key used by the factory
        client: Shared async HTTP client
    """

    ai_type: str = ""

    def __init__(self, client: httpx.AsyncClient) -> None:
        """
        Initialize provider with a shared HTTP client.

        Args:
            client: httpx.AsyncClient owned by the caller
        """
        self.client = client

    @abstractmethod
    async def chat(self, prompt: str, config: ProviderConfig) -> str:
        """
        Send a single user prompt.

        Args:
            prompt: Complete prompt text
            config: Resolved provider configuration

        Returns:
            str: Raw response body (see extract_content)

        Raises:
            AiProviderError: On transport or vendor failure
        """

    @abstractmethod
    async def multi_turn_chat(
        self,
        history: str,
        system_prompt: str | None,
        config: ProviderConfig,
    ) -> str:
        """
        Send a conversation history and return the raw response body.

        Raises:
            AiProviderError: On transport or vendor failure
        """

    @abstractmethod
    def stream_chat(
        self,
        history: str,
        system_prompt: str | None,
        config: ProviderConfig,
    ) -> AsyncIterator[str]:
        """
        Stream a conversation reply as text chunks.

        Raises:
            AiProviderError: On transport or vendor failure
        """

    def _require_api_key(self, config: ProviderConfig, operation: str) -> str:
        if not config.api_key:
            raise AiProviderError(
                provider=config.ai_type or self.ai_type,
                operation=operation,
                message="API key is not configured",
                kind="config",
            )
        return config.api_key

    async def _post_json(
        self,
        url: str,
        headers: dict[str, str],
        body: dict[str, Any],
        config: ProviderConfig,
        operation: str,
    ) -> str:
        """
        POST a JSON body and return the response text.

        Raises:
            AiProviderError: On non-2xx status, timeout or connection failure
        """
        provider = config.ai_type or self.ai_type
        log_with_context(
            logger,
            logging.INFO,
            "Calling LLM provider",
            provider=provider,
            operation=operation,
            model=config.model_name,
        )
        try:
            response = await self.client.post(
                url, json=body, headers=headers, timeout=config.timeout_seconds
            )
        except httpx.TimeoutException as e:
            raise AiProviderError(provider, operation, f"timeout: {e}", kind="timeout") from e
        except httpx.HTTPError as e:
            raise AiProviderError(provider, operation, f"connection failed: {e}", kind="connection") from e

        if response.is_error:
            body_text = response.text[:_ERROR_BODY_LIMIT]
            log_with_context(
                logger,
                logging.WARNING,
                "LLM provider returned error status",
                provider=provider,
                status_code=response.status_code,
                body=body_text,
            )
            raise AiProviderError(
                provider,
                operation,
                f"HTTP {response.status_code}: {body_text}",
                status_code=response.status_code,
                response_body=body_text,
            )
        return response.text

    async def _stream_lines(
        self,
        url: str,
        headers: dict[str, str],
        body: dict[str, Any],
        config: ProviderConfig,
        operation: str,
        parse_line: LineParser,
    ) -> AsyncIterator[str]:
        """
        POST a streaming request and yield decoded text chunks.

        Stops at the first line the parser marks as final.

        Raises:
            AiProviderError: On non-2xx status, timeout or connection failure
        """
        provider = config.ai_type or self.ai_type
        try:
            async with self.client.stream(
                "POST", url, json=body, headers=headers, timeout=config.timeout_seconds
            ) as response:
                if response.is_error:
                    error_body = (await response.aread()).decode("utf-8", errors="replace")
                    raise AiProviderError(
                        provider,
                        operation,
                        f"HTTP {response.status_code}: {error_body[:_ERROR_BODY_LIMIT]}",
                        status_code=response.status_code,
                        response_body=error_body[:_ERROR_BODY_LIMIT],
                    )
                async for line in response.aiter_lines():
                    chunk, finished = parse_line(line.strip())
                    if chunk:
                        yield chunk
                    if finished:
                        break
        except httpx.TimeoutException as e:
            raise AiProviderError(provider, operation, f"timeout: {e}", kind="timeout") from e
        except httpx.HTTPError as e:
            raise AiProviderError(provider, operation, f"connection failed: {e}", kind="connection") from e
