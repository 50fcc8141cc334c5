"""
Post service orchestrator.

Maintains the local article records the AI features read.

Dependencies: backend.boundary.db.CRUD
System role: Post use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.post_crud import post_crud
from backend.boundary.db.models.post_model import PostModel

logger = logging.getLogger(__name__)


def _to_dict(post: PostModel) -> dict:
    return {
        "id": post.id,
        "name": post.name,
        "title": post.title,
        "permalink": post.permalink,
        "content": post.content,
        "excerpt": post.excerpt,
        "excerpt_auto_generate": post.excerpt_auto_generate,
        "annotations": dict(post.annotations or {}),
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


class PostService:
    """Post service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize post service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def upsert_post(
        self,
        name: str,
        title: str = "",
        permalink: str | None = None,
        content: str = "",
        excerpt: str | None = None,
        excerpt_auto_generate: bool = True,
        annotations: dict[str, str] | None = None,
    ) -> dict:
        """
        Create a post, or replace the fields of the post with this slug.

        Args:
            name: Unique slug
            title: Display title
            permalink: Public URL
            content: Raw body
            excerpt: Current excerpt
            excerpt_auto_generate: Whether the excerpt is derived automatically
            annotations: String flags

        Returns:
            dict: Stored post
        """
        fields = {
            "title": title,
            "permalink": permalink,
            "content": content,
            "excerpt": excerpt,
            "excerpt_auto_generate": excerpt_auto_generate,
            "annotations": dict(annotations or {}),
        }
        try:
            existing = await post_crud.get_by_name(self.db, name)
            if existing is None:
                post = await post_crud.create(self.db, name=name, **fields)
                logger.info("Post created", extra={"post_name": name})
            else:
                post = await post_crud.update_by_id(self.db, existing.id, **fields)
                logger.info("Post updated", extra={"post_name": name})
            return _to_dict(post)
        except Exception as e:
            logger.error("Failed to store post", extra={"error": str(e), "post_name": name})
            raise

    async def get_post(self, name: str) -> dict:
        """
        Get post by slug.

        Raises:
            ValueError: If post not found
        """
        post = await post_crud.get_by_name(self.db, name)
        if post is None:
            raise ValueError(f"Post {name} does not exist")
        return _to_dict(post)

    async def list_posts(self, limit: int | None = None, offset: int = 0) -> list[dict]:
        """Posts newest first."""
        posts = await post_crud.list_recent(self.db, limit=limit, offset=offset)
        return [_to_dict(post) for post in posts]
