"""
Test suite for polish failure messages.

System role: Verification of provider error to user message mapping
"""

import pytest

from backend.application.services.polish_service import polish_error_message
from backend.core.exceptions import AiProviderError


def error(kind: str = "http", status_code: int | None = None) -> AiProviderError:
    return AiProviderError("openAi", "chat", "boom", status_code=status_code, kind=kind)


@pytest.mark.parametrize(
    "exc,expected",
    [
        (error(kind="timeout"), "AI服务响应超时，请稍后重试"),
        (error(status_code=401), "API密钥无效，请检查配置"),
        (error(status_code=429), "API调用频率超限，请稍后重试"),
        (error(kind="connection"), "网络连接失败，请检查网络设置"),
        (error(status_code=403), "API访问被拒绝，请检查权限配置"),
        (error(status_code=500), "文章润色服务暂时不可用，请稍后重试"),
        (error(kind="config"), "文章润色服务暂时不可用，请稍后重试"),
    ],
)
def test_polish_error_message(exc: AiProviderError, expected: str) -> None:
    assert polish_error_message(exc) == expected
