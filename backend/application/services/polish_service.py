"""
Polish service.

Rewrites a text segment for fluency and maps provider failures to
user-facing messages.

Dependencies: backend.core.ai
System role: Text polishing use case
"""

import logging

from backend.application.services.ai_config_service import AiConfigService
from backend.core.ai.config import AiFunction
from backend.core.ai.prompts import build_polish_prompt
from backend.core.ai.response_parsing import extract_content
from backend.core.exceptions import AiProviderError
from backend.models.polish import PolishResponse

logger = logging.getLogger(__name__)


def polish_error_message(error: AiProviderError) -> str:
    """
    User-facing message for a failed polish call.

    Args:
        error: Provider failure

    Returns:
        str: Message keyed on failure kind and HTTP status
    """
    if error.kind == "timeout":
        return "AI服务响应超时，请稍后重试"
    if error.status_code == 401:
        return "API密钥无效，请检查配置"
    if error.status_code == 429:
        return "API调用频率超限，请稍后重试"
    if error.kind == "connection":
        return "网络连接失败，请检查网络设置"
    if error.status_code == 403:
        return "API访问被拒绝，请检查权限配置"
    return "文章润色服务暂时不可用，请稍后重试"


class PolishService:
    """Polishes article segments."""

    def __init__(self, ai_config: AiConfigService) -> None:
        self.ai_config = ai_config

    async def polish(self, content: str) -> PolishResponse:
        """
        Polish a text segment.

        Args:
            content: Validated, non-blank text

        Returns:
            PolishResponse: Rewritten text, or a failure with a mapped message
        """
        max_length = self.ai_config.settings.polish_max_length
        if len(content) > max_length:
            return PolishResponse.failed(
                content, f"内容长度({len(content)})超过最大限制({max_length})，请分段润色"
            )

        config = self.ai_config.get_config(AiFunction.POLISH)
        provider = self.ai_config.get_provider(AiFunction.POLISH)
        prompt = build_polish_prompt(content, config.system_prompt)
        logger.info(
            "Polishing content",
            extra={"ai_type": config.ai_type, "content_length": len(content), "has_api_key": bool(config.api_key)},
        )
        try:
            raw = await provider.chat(prompt, config)
        except AiProviderError as e:
            logger.error(
                "Polish failed",
                extra={"ai_type": config.ai_type, "kind": e.kind, "status_code": e.status_code, "error": e.message},
            )
            return PolishResponse.failed(content, polish_error_message(e))

        polished = (extract_content(raw) or "").strip()
        logger.info(
            "Polish completed",
            extra={"original_length": len(content), "polished_length": len(polished)},
        )
        return PolishResponse.ok(content, polished)
