"""
Test suite for PostService against an in-memory database.

System role: Verification of post upsert and lookup
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.post_service import PostService


@pytest.fixture
def post_service(test_async_db: AsyncSession) -> PostService:
    return PostService(db=test_async_db)


class TestPostService:
    """Test suite for PostService."""

    @pytest.mark.asyncio
    async def test_upsert_should_create_then_replace(self, post_service: PostService) -> None:
        # Arrange
        created = await post_service.upsert_post("hello", title="Hello", content="v1", annotations={"k": "v"})

        # Act
        updated = await post_service.upsert_post("hello", title="Hello 2", content="v2")

        # Assert
        assert updated["id"] == created["id"]
        assert updated["title"] == "Hello 2"
        assert updated["content"] == "v2"
        assert updated["annotations"] == {}

    @pytest.mark.asyncio
    async def test_get_missing_post_should_raise(self, post_service: PostService) -> None:
        with pytest.raises(ValueError, match="does not exist"):
            await post_service.get_post("ghost")

    @pytest.mark.asyncio
    async def test_list_posts_should_respect_limit(self, post_service: PostService) -> None:
        for name in ("a", "b", "c"):
            await post_service.upsert_post(name, content=name)

        posts = await post_service.list_posts(limit=2)

        assert len(posts) == 2
        assert {p["name"] for p in await post_service.list_posts()} == {"a", "b", "c"}
