"""
Test suite for provider selection and OpenAI URL handling.

System role: Verification of provider routing
"""

import httpx
import pytest

from backend.core.ai.config import ProviderConfig
from backend.core.ai.dashscope_provider import DashScopeProvider
from backend.core.ai.factory import AiProviderFactory
from backend.core.ai.openai_provider import (
    CODESPHERE_BASE_URL,
    DEFAULT_OPENAI_URL,
    SILICONFLOW_BASE_URL,
    OpenAiProvider,
    build_api_url,
    resolve_base_url,
)
from backend.core.ai.zhipu_provider import ZhipuAiProvider


@pytest.fixture
def factory() -> AiProviderFactory:
    return AiProviderFactory.with_default_providers(httpx.AsyncClient())


class TestAiProviderFactory:
    """Test suite for AiProviderFactory.get_provider()."""

    @pytest.mark.parametrize(
        "ai_type,expected",
        [
            ("openAi", OpenAiProvider),
            ("zhipuAi", ZhipuAiProvider),
            ("dashScope", DashScopeProvider),
            ("codesphere", OpenAiProvider),
            ("siliconFlow", OpenAiProvider),
            ("SILICONFLOW", OpenAiProvider),
        ],
    )
    def test_should_resolve_type_key(self, factory: AiProviderFactory, ai_type: str, expected: type) -> None:
        assert isinstance(factory.get_provider(ai_type), expected)

    @pytest.mark.parametrize("ai_type", ["unknown", "", None])
    def test_should_fall_back_to_first_registered(self, factory: AiProviderFactory, ai_type) -> None:
        assert isinstance(factory.get_provider(ai_type), OpenAiProvider)

    def test_should_list_registered_types_in_order(self, factory: AiProviderFactory) -> None:
        assert factory.registered_types == ["openAi", "zhipuAi", "dashScope"]

    def test_should_reject_empty_registry(self) -> None:
        with pytest.raises(ValueError):
            AiProviderFactory([])


class TestOpenAiUrls:
    """Test suite for build_api_url() and resolve_base_url()."""

    @pytest.mark.parametrize(
        "base_url,expected",
        [
            (None, DEFAULT_OPENAI_URL),
            ("  ", DEFAULT_OPENAI_URL),
            ("https://proxy.example.com", "https://proxy.example.com/v1/chat/completions"),
            ("https://proxy.example.com///", "https://proxy.example.com/v1/chat/completions"),
            (
                "https://proxy.example.com/v1/chat/completions",
                "https://proxy.example.com/v1/chat/completions",
            ),
        ],
    )
    def test_build_api_url(self, base_url, expected: str) -> None:
        assert build_api_url(base_url) == expected

    def test_codesphere_should_use_fixed_base(self) -> None:
        config = ProviderConfig(ai_type="codesphere", base_url="https://ignored.example.com")
        assert resolve_base_url(config) == CODESPHERE_BASE_URL

    def test_siliconflow_should_default_base(self) -> None:
        assert resolve_base_url(ProviderConfig(ai_type="siliconFlow")) == SILICONFLOW_BASE_URL

    def test_openai_should_use_configured_base(self) -> None:
        config = ProviderConfig(ai_type="openAi", base_url="https://proxy.example.com")
        assert resolve_base_url(config) == "https://proxy.example.com"
