"""
Tag service orchestrator.

Suggests tags for a post, preferring tags the site already has, and can
create the suggested tags that are missing.

Dependencies: backend.boundary.db, backend.core.ai
System role: Tag suggestion use case
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.ai_config_service import AiConfigService
from backend.boundary.db.CRUD.post_crud import post_crud
from backend.boundary.db.CRUD.tag_crud import tag_crud
from backend.core.ai.config import AiFunction
from backend.core.ai.prompts import build_tag_prompt, parse_tags
from backend.core.ai.response_parsing import extract_content
from backend.core.exceptions import AiProviderError
from backend.models.tags import TagGenerationResult, TagItem

logger = logging.getLogger(__name__)


class TagService:
    """Tag service orchestrator."""

    def __init__(self, db: AsyncSession, ai_config: AiConfigService) -> None:
        """
        Initialize tag service.

        Args:
            db: Async SQLAlchemy session
            ai_config: Provider resolver for the tags function
        """
        self.db = db
        self.ai_config = ai_config

    async def list_tags(self) -> list[str]:
        """Display names of all tags."""
        return await tag_crud.list_display_names(self.db)

    async def generate_tags(self, post_name: str) -> TagGenerationResult:
        """
        Suggest tags for a post.

        Empty content or a provider failure yields an empty result.

        Args:
            post_name: Post slug

        Returns:
            TagGenerationResult: Tags flagged as existing or new

        Raises:
            ValueError: If the post does not exist
        """
        post = await post_crud.get_by_name(self.db, post_name)
        if post is None:
            raise ValueError(f"Post {post_name} does not exist")

        content = post.content or ""
        if not content.strip():
            logger.info("Post has no content, no tags generated", extra={"post_name": post_name})
            return TagGenerationResult.empty()

        limit = self.ai_config.settings.tag_generation_count
        existing = await tag_crud.list_display_names(self.db)
        config = self.ai_config.get_config(AiFunction.TAGS)
        provider = self.ai_config.get_provider(AiFunction.TAGS)
        prompt = build_tag_prompt(content, limit, existing, config.system_prompt)

        logger.info(
            "Generating tags",
            extra={
                "post_name": post_name,
                "ai_type": config.ai_type,
                "prompt_length": len(prompt),
                "existing_tag_count": len(existing),
            },
        )
        try:
            raw = await provider.chat(prompt, config)
        except AiProviderError as e:
            logger.error("Tag generation failed", extra={"post_name": post_name, "error": str(e)})
            return TagGenerationResult.empty()

        names = parse_tags(extract_content(raw), limit)
        existing_set = set(existing)
        items = [TagItem(name=name, is_existing=name in existing_set) for name in names]
        existing_count = sum(1 for item in items if item.is_existing)

        logger.info(
            "Tags generated",
            extra={"post_name": post_name, "total": len(items), "existing": existing_count},
        )
        return TagGenerationResult(
            tags=items,
            total_count=len(items),
            existing_count=existing_count,
            new_count=len(items) - existing_count,
        )

    async def ensure_tags(self, names: list[str]) -> list[str]:
        """
        Create tags that do not exist yet.

        Args:
            names: Display names, in the order to return them

        Returns:
            list[str]: De-duplicated, non-blank names in input order
        """
        normalized: list[str] = []
        for name in names:
            name = name.strip()
            if name and name not in normalized:
                normalized.append(name)
        if not normalized:
            return []

        found = {tag.display_name for tag in await tag_crud.get_by_display_names(self.db, normalized)}
        for name in normalized:
            if name not in found:
                await tag_crud.create_with_display_name(self.db, name)
                logger.info("Tag created", extra={"display_name": name})
        return normalized

    async def generate_and_ensure(self, post_name: str) -> TagGenerationResult:
        """Suggest tags, then create the new ones."""
        result = await self.generate_tags(post_name)
        await self.ensure_tags([item.name for item in result.tags])
        return result
