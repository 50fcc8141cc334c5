"""
Article and title generation service.

Dependencies: backend.core.ai
System role: Article/title generation use cases
"""

import logging

from backend.application.services.ai_config_service import AiConfigService
from backend.core.ai.config import AiFunction
from backend.core.ai.prompts import build_article_prompt, build_title_prompt
from backend.core.ai.response_parsing import extract_content
from backend.core.exceptions import AiProviderError
from backend.models.generate import GenerateResponse

logger = logging.getLogger(__name__)


class GenerateService:
    """Generates full articles from a topic and titles from article text."""

    def __init__(self, ai_config: AiConfigService) -> None:
        self.ai_config = ai_config

    async def _complete(self, function: AiFunction, prompt: str) -> str:
        config = self.ai_config.get_config(function)
        provider = self.ai_config.get_provider(function)
        logger.info(
            "Requesting generation",
            extra={"function": function.value, "ai_type": config.ai_type, "prompt_length": len(prompt)},
        )
        raw = await provider.chat(prompt, config)
        return extract_content(raw) or ""

    async def generate_article(
        self,
        topic: str,
        output_format: str = "markdown",
        style: str = "通俗易懂",
        article_type: str = "full",
        max_length: int = 2000,
    ) -> GenerateResponse:
        """
        Generate an article.

        Args:
            topic: Validated topic text
            output_format: markdown or html
            style: Style key or free text
            article_type: Generation type
            max_length: Approximate length in characters

        Returns:
            GenerateResponse: Article text, or the failure message
        """
        system_prompt = self.ai_config.get_config(AiFunction.GENERATE).system_prompt
        prompt = build_article_prompt(
            topic,
            style=style,
            article_type=article_type,
            max_length=max_length,
            output_format=output_format,
            system_prompt=system_prompt,
        )
        try:
            content = await self._complete(AiFunction.GENERATE, prompt)
        except AiProviderError as e:
            logger.error("Article generation failed", extra={"error": str(e)})
            return GenerateResponse(success=False, message=f"生成失败: {e.message}")

        logger.info("Article generated", extra={"content_length": len(content)})
        return GenerateResponse(success=True, content=content, message="文章生成成功")

    async def generate_titles(
        self,
        content: str,
        style: str = "有利于SEO的标题",
        count: int | None = None,
    ) -> GenerateResponse:
        """
        Generate candidate titles, one per line.

        Args:
            content: Validated article text
            style: Title style key or free text
            count: Number of titles (configured default when None)

        Returns:
            GenerateResponse: Numbered title list, or the failure message
        """
        count = count or self.ai_config.settings.title_default_count
        system_prompt = self.ai_config.get_config(AiFunction.TITLE).system_prompt
        prompt = build_title_prompt(content, style=style, count=count, system_prompt=system_prompt)
        try:
            titles = await self._complete(AiFunction.TITLE, prompt)
        except AiProviderError as e:
            logger.error("Title generation failed", extra={"error": str(e)})
            return GenerateResponse(success=False, message=f"生成失败: {e.message}")

        return GenerateResponse(success=True, content=titles, message="标题生成成功")
