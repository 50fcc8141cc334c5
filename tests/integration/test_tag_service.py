"""
Test suite for TagService against an in-memory database.

System role: Verification of tag suggestion and creation
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.tag_service import TagService
from backend.boundary.db.CRUD.post_crud import post_crud
from backend.boundary.db.CRUD.tag_crud import tag_crud
from backend.core.exceptions import AiProviderError


@pytest.fixture
def tag_service(test_async_db: AsyncSession, mock_ai_config: MagicMock) -> TagService:
    return TagService(db=test_async_db, ai_config=mock_ai_config)


class TestGenerateTags:
    """Test suite for TagService.generate_tags()."""

    @pytest.mark.asyncio
    async def test_should_flag_existing_tags(
        self, tag_service: TagService, test_async_db: AsyncSession, mock_provider: MagicMock
    ) -> None:
        # Arrange
        await post_crud.create(test_async_db, name="hello", title="Hello", content="关于Python异步的文章")
        await tag_crud.create_with_display_name(test_async_db, "Python")
        mock_provider.chat.return_value = "1. Python\n2. 异步编程\n3. Python"

        # Act
        result = await tag_service.generate_tags("hello")

        # Assert
        assert [(t.name, t.is_existing) for t in result.tags] == [("Python", True), ("异步编程", False)]
        assert result.total_count == 2
        assert result.existing_count == 1
        assert result.new_count == 1
        assert "Python" in mock_provider.chat.call_args.args[0]

    @pytest.mark.asyncio
    async def test_empty_content_should_skip_provider(
        self, tag_service: TagService, test_async_db: AsyncSession, mock_provider: MagicMock
    ) -> None:
        await post_crud.create(test_async_db, name="empty", title="Empty", content="   ")

        result = await tag_service.generate_tags("empty")

        assert result.total_count == 0
        mock_provider.chat.assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_failure_should_return_empty_result(
        self, tag_service: TagService, test_async_db: AsyncSession, mock_provider: MagicMock
    ) -> None:
        await post_crud.create(test_async_db, name="hello", title="Hello", content="正文")
        mock_provider.chat.side_effect = AiProviderError("openAi", "chat", "HTTP 429", status_code=429)

        result = await tag_service.generate_tags("hello")

        assert result.tags == []

    @pytest.mark.asyncio
    async def test_missing_post_should_raise(self, tag_service: TagService) -> None:
        with pytest.raises(ValueError, match="does not exist"):
            await tag_service.generate_tags("ghost")


class TestEnsureTags:
    """Test suite for TagService.ensure_tags() and generate_and_ensure()."""

    @pytest.mark.asyncio
    async def test_should_create_only_missing_tags(self, tag_service: TagService, test_async_db: AsyncSession) -> None:
        # Arrange
        await tag_crud.create_with_display_name(test_async_db, "Python")

        # Act
        names = await tag_service.ensure_tags([" Python ", "缓存", "缓存", ""])

        # Assert
        assert names == ["Python", "缓存"]
        assert sorted(await tag_service.list_tags()) == sorted(["Python", "缓存"])

    @pytest.mark.asyncio
    async def test_generate_and_ensure_should_report_pre_creation_state(
        self, tag_service: TagService, test_async_db: AsyncSession, mock_provider: MagicMock
    ) -> None:
        await post_crud.create(test_async_db, name="hello", title="Hello", content="正文")
        mock_provider.chat.return_value = "数据库,索引"

        result = await tag_service.generate_and_ensure("hello")

        assert all(not t.is_existing for t in result.tags)
        assert sorted(await tag_service.list_tags()) == sorted(["数据库", "索引"])
