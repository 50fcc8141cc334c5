"""
Test suite for PolishService.

System role: Verification of polish orchestration
"""

from unittest.mock import MagicMock

import pytest

from backend.application.services.polish_service import PolishService
from backend.core.exceptions import AiProviderError


@pytest.fixture
def polish_service(mock_ai_config: MagicMock) -> PolishService:
    return PolishService(ai_config=mock_ai_config)


class TestPolish:
    """Test suite for PolishService.polish()."""

    @pytest.mark.asyncio
    async def test_should_return_trimmed_polished_text(
        self, polish_service: PolishService, mock_provider: MagicMock
    ) -> None:
        # Arrange
        mock_provider.chat.return_value = '{"choices":[{"message":{"content":"  更好的文字  \\n"}}]}'

        # Act
        result = await polish_service.polish("原始文字")

        # Assert
        assert result.success is True
        assert result.message == "文章润色成功"
        assert result.original_content == "原始文字"
        assert result.polished_content == "更好的文字"
        assert result.original_length == 4
        assert result.polished_length == 5

    @pytest.mark.asyncio
    async def test_should_reject_content_over_configured_limit(
        self, polish_service: PolishService, mock_provider: MagicMock, mock_ai_config: MagicMock
    ) -> None:
        # Arrange
        mock_ai_config.settings.polish_max_length = 5

        # Act
        result = await polish_service.polish("一二三四五六")

        # Assert
        assert result.success is False
        assert result.message == "内容长度(6)超过最大限制(5)，请分段润色"
        mock_provider.chat.assert_not_called()

    @pytest.mark.asyncio
    async def test_should_map_provider_failure(
        self, polish_service: PolishService, mock_provider: MagicMock
    ) -> None:
        mock_provider.chat.side_effect = AiProviderError("openAi", "chat", "HTTP 401", status_code=401)

        result = await polish_service.polish("原始文字")

        assert result.success is False
        assert result.message == "API密钥无效，请检查配置"
        assert result.original_content == "原始文字"
