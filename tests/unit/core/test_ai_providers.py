"""
Test suite for the HTTP LLM providers.

Uses httpx.MockTransport to capture requests and script vendor replies.

System role: Verification of provider wire behaviour and typed failures
"""

import json

import httpx
import pytest

from backend.core.ai.config import ProviderConfig
from backend.core.ai.dashscope_provider import DASHSCOPE_API_URL, DashScopeProvider
from backend.core.ai.openai_provider import OpenAiProvider
from backend.core.ai.zhipu_provider import ZHIPU_API_URL, ZhipuAiProvider
from backend.core.exceptions import AiProviderError


def openai_config(**overrides) -> ProviderConfig:
    values = {"ai_type": "openAi", "api_key": "sk-test", "model_name": "gpt-test"}
    values.update(overrides)
    return ProviderConfig(**values)


class TestOpenAiProviderChat:
    """Test suite for OpenAiProvider.chat()."""

    @pytest.mark.asyncio
    async def test_chat_should_post_prompt_with_bearer_key(self, make_http_client) -> None:
        # Arrange
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, text='{"choices":[{"message":{"content":"ok"}}]}')

        provider = OpenAiProvider(make_http_client(handler))

        # Act
        raw = await provider.chat("hello", openai_config(base_url="https://proxy.example.com/"))

        # Assert
        request = captured[0]
        assert str(request.url) == "https://proxy.example.com/v1/chat/completions"
        assert request.headers["Authorization"] == "Bearer sk-test"
        assert json.loads(request.content) == {
            "model": "gpt-test",
            "messages": [{"role": "user", "content": "hello"}],
        }
        assert raw == '{"choices":[{"message":{"content":"ok"}}]}'

    @pytest.mark.asyncio
    async def test_chat_should_raise_typed_error_on_status(self, make_http_client) -> None:
        provider = OpenAiProvider(make_http_client(lambda r: httpx.Response(401, text="bad key")))

        with pytest.raises(AiProviderError) as exc_info:
            await provider.chat("hello", openai_config())

        assert exc_info.value.status_code == 401
        assert exc_info.value.kind == "http"
        assert exc_info.value.operation == "chat"
        assert exc_info.value.response_body == "bad key"

    @pytest.mark.asyncio
    async def test_chat_should_classify_timeout(self, make_http_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        provider = OpenAiProvider(make_http_client(handler))

        with pytest.raises(AiProviderError) as exc_info:
            await provider.chat("hello", openai_config())

        assert exc_info.value.kind == "timeout"

    @pytest.mark.asyncio
    async def test_chat_should_classify_connection_failure(self, make_http_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        provider = OpenAiProvider(make_http_client(handler))

        with pytest.raises(AiProviderError) as exc_info:
            await provider.chat("hello", openai_config())

        assert exc_info.value.kind == "connection"

    @pytest.mark.asyncio
    async def test_chat_should_require_api_key(self, make_http_client) -> None:
        calls: list[httpx.Request] = []
        provider = OpenAiProvider(make_http_client(lambda r: calls.append(r) or httpx.Response(200)))

        with pytest.raises(AiProviderError) as exc_info:
            await provider.chat("hello", openai_config(api_key=None))

        assert exc_info.value.kind == "config"
        assert calls == []


class TestStreaming:
    """Test suite for stream_chat() across providers."""

    @pytest.mark.asyncio
    async def test_openai_stream_should_yield_chunks_until_done(self, make_http_client) -> None:
        # Arrange
        body = (
            'data: {"choices":[{"delta":{"content":"Hel"}}]}\n\n'
            'data: {"choices":[{"delta":{"content":"lo"}}]}\n\n'
            "data: [DONE]\n\n"
            'data: {"choices":[{"delta":{"content":"ignored"}}]}\n\n'
        )
        provider = OpenAiProvider(make_http_client(lambda r: httpx.Response(200, text=body)))

        # Act
        chunks = [c async for c in provider.stream_chat("hi", None, openai_config())]

        # Assert
        assert chunks == ["Hel", "lo"]

    @pytest.mark.asyncio
    async def test_stream_should_raise_on_error_status(self, make_http_client) -> None:
        provider = ZhipuAiProvider(make_http_client(lambda r: httpx.Response(429, text="slow down")))

        with pytest.raises(AiProviderError) as exc_info:
            async for _ in provider.stream_chat("hi", None, openai_config(ai_type="zhipuAi")):
                pass

        assert exc_info.value.status_code == 429

    @pytest.mark.asyncio
    async def test_dashscope_stream_should_stop_on_finish_reason(self, make_http_client) -> None:
        # Arrange
        captured: list[httpx.Request] = []
        body = (
            'data:{"output":{"text":"你","finish_reason":"null"}}\n'
            "\n"
            'data:{"output":{"text":"好","finish_reason":"stop"}}\n'
            'data:{"output":{"text":"extra","finish_reason":"null"}}\n'
        )

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, text=body)

        provider = DashScopeProvider(make_http_client(handler))
        config = openai_config(ai_type="dashScope", model_name="qwen-turbo")

        # Act
        chunks = [c async for c in provider.stream_chat("hi", "sys", config)]

        # Assert
        assert chunks == ["你", "好"]
        assert captured[0].headers["Accept"] == "text/event-stream"
        payload = json.loads(captured[0].content)
        assert payload["parameters"] == {"incremental_output": True}
        assert payload["input"]["messages"][0] == {"role": "system", "content": "sys"}


class TestVendorEndpoints:
    """Test suite for fixed vendor endpoints and bodies."""

    @pytest.mark.asyncio
    async def test_zhipu_chat_should_use_fixed_endpoint(self, make_http_client) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, text="{}")

        provider = ZhipuAiProvider(make_http_client(handler))
        await provider.chat("hi", openai_config(ai_type="zhipuAi", model_name="glm-4-flash"))

        assert str(captured[0].url) == ZHIPU_API_URL

    @pytest.mark.asyncio
    async def test_dashscope_chat_should_send_prompt_input(self, make_http_client) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, text='{"output":{"text":"ok"}}')

        provider = DashScopeProvider(make_http_client(handler))
        await provider.chat("hi", openai_config(ai_type="dashScope", model_name="qwen-turbo"))

        assert str(captured[0].url) == DASHSCOPE_API_URL
        assert json.loads(captured[0].content) == {"model": "qwen-turbo", "input": {"prompt": "hi"}}
