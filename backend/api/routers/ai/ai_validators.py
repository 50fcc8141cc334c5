"""
AI suite validation utilities.

Input rules for the AI endpoints. Messages are shown to the editor as-is,
so handlers report them in the endpoint's result body rather than as an
HTTP error.

Dependencies: backend.models
System role: AI request validation
"""

from backend.models.generate import GenerateArticleRequest, GenerateTitleRequest
from backend.models.post import CreatePostRequest

MAX_TOPIC_LENGTH = 1000
MAX_TITLE_SOURCE_LENGTH = 10000
MAX_POLISH_LENGTH = 8000


class AiRequestValidationError(ValueError):
    """Raised when an AI request fails validation."""


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_article_request(request: GenerateArticleRequest) -> str:
    """
    Validate an article generation request.

    Returns:
        str: The topic

    Raises:
        AiRequestValidationError: Empty or overlong topic
    """
    if _is_blank(request.topic):
        raise AiRequestValidationError("文章主题不能为空")
    if len(request.topic) > MAX_TOPIC_LENGTH:
        raise AiRequestValidationError("文章主题长度不能超过1000个字符")
    return request.topic


def validate_title_request(request: GenerateTitleRequest) -> str:
    """
    Validate a title generation request.

    Raises:
        AiRequestValidationError: Empty or overlong content
    """
    if _is_blank(request.content):
        raise AiRequestValidationError("文章内容不能为空")
    if len(request.content) > MAX_TITLE_SOURCE_LENGTH:
        raise AiRequestValidationError("文章内容长度不能超过10000个字符")
    return request.content


def validate_polish_content(content: str | None) -> str:
    """
    Validate polish input.

    Raises:
        AiRequestValidationError: Empty or overlong content
    """
    if _is_blank(content):
        raise AiRequestValidationError("文章内容不能为空")
    if len(content) > MAX_POLISH_LENGTH:
        raise AiRequestValidationError("文章内容长度不能超过8000个字符")
    return content


def validate_conversation_history(history: str | None) -> str:
    """
    Validate a conversation history.

    Raises:
        AiRequestValidationError: Empty history
    """
    if _is_blank(history):
        raise AiRequestValidationError("对话历史不能为空")
    return history


def validate_post_name_for_tags(post_name: str | None) -> str:
    """
    Validate the post name of a tag request.

    Returns:
        str: Trimmed post name

    Raises:
        AiRequestValidationError: Blank name
    """
    if _is_blank(post_name):
        raise AiRequestValidationError("postName 不能为空")
    return post_name.strip()


def validate_post_name_for_update(post_name: str | None) -> str:
    """
    Validate the post name of an excerpt update.

    Returns:
        str: Trimmed post name

    Raises:
        AiRequestValidationError: Blank name
    """
    if _is_blank(post_name):
        raise AiRequestValidationError("文章名称不能为空")
    return post_name.strip()


def validate_post_creation(request: CreatePostRequest) -> None:
    """
    Validate a post upsert.

    Raises:
        AiRequestValidationError: Blank slug or blank annotation keys
    """
    if not request.name.strip():
        raise AiRequestValidationError("Post name cannot be empty or whitespace-only")
    if any(not key.strip() for key in request.annotations):
        raise AiRequestValidationError("Annotation keys cannot be empty")
