"""
Prompt builders for the AI features.

Each builder returns the exact text sent to the provider. Output parsers
for features with structured replies (tags) live here too.

Dependencies: re (stdlib)
System role: Prompt construction and reply post-processing
"""

import re

DEFAULT_SUMMARY_PROMPT = "你是专业摘要助手，请为以下文章生成简明摘要："
DEFAULT_TAG_ROLE = (
    "你是一个专业的标签生成助手，请根据文章内容生成相关的中文标签。"
    "标签应准确反映主题，适合SEO，建议2-4字。"
)
DEFAULT_POLISH_PROMPT = "你是一个专业的文章润色助手，请改善以下文章的语言表达和流畅性，保持原意不变。"

ARTICLE_STYLES: dict[str, str] = {
    "通俗易懂": "用简单语言解释复杂概念，适合大众阅读",
    "正式学术": "严谨的学术写作风格，适合论文和研究报告",
    "新闻资讯": "客观、简洁的新闻报道风格，注重事实",
    "技术文档": "详细、准确的技术说明，适合开发者",
    "创意文学": "富有想象力的文学表达，语言优美",
    "幽默风趣": "轻松幽默的表达方式，增加趣味性",
    "严谨专业": "专业、权威的写作风格，适合商务场合",
    "轻松活泼": "轻松愉快的表达方式，亲和力强",
    "商务正式": "正式的商务写作风格，专业且礼貌",
    "科普教育": "通俗易懂的科学解释，适合教学",
    "个人博客": "个人化的写作风格，亲切自然",
    "产品介绍": "突出产品特点，吸引用户关注",
    "教程指南": "步骤清晰，易于跟随操作",
    "评论分析": "深入分析，提供独到见解",
    "故事叙述": "生动有趣的故事化表达",
    "对话访谈": "问答形式，互动性强",
}

TITLE_STYLES: dict[str, str] = {
    "有利于SEO的标题": "优化搜索引擎排名，包含关键词，吸引点击",
    "吸引眼球的标题": "使用数字、疑问句、对比等技巧，增加点击率",
    "简洁明了": "直接表达核心内容，简洁有力",
    "文艺范": "富有诗意和文学性，语言优美",
    "专业术语": "使用专业词汇，体现权威性",
    "疑问式": "以疑问句形式，引发读者思考",
    "数字式": "包含具体数字，增加可信度",
    "对比式": "通过对比突出文章价值",
    "故事式": "具有故事性，引人入胜",
    "热点式": "结合当前热点话题",
}

MAX_TAG_LENGTH = 12

_TAG_SPLIT = re.compile(r"[\n,，]")
_TAG_MARKERS = re.compile(r"^[-•*\d.、•●◦‣⁃∙]+")


def build_summary_prompt(content: str, system_prompt: str | None = None) -> str:
    """Summary prompt: the instruction line followed by the article text."""
    instruction = system_prompt if system_prompt is not None else DEFAULT_SUMMARY_PROMPT
    return f"{instruction}\n{content}"


def build_article_prompt(
    topic: str,
    style: str | None = None,
    article_type: str | None = None,
    max_length: int | None = None,
    output_format: str | None = None,
    system_prompt: str | None = None,
) -> str:
    """
    Build the article generation prompt.

    Known styles are expanded to their description; custom styles pass
    through verbatim. Only `markdown` and `html` formats add a format line.

    Args:
        topic: Article topic
        style: Writing style key or free text
        article_type: Generation type (any non-empty value means a full article)
        max_length: Approximate length in characters
        output_format: markdown or html
        system_prompt: Optional instruction placed first

    Returns:
        str: Prompt text
    """
    parts: list[str] = []
    if system_prompt and system_prompt.strip():
        parts.append(f"{system_prompt}\n\n")
    parts.append("请根据以下要求生成文章：\n")
    parts.append(f"主题：{topic}\n")
    if style and style.strip():
        parts.append(f"写作风格：{ARTICLE_STYLES.get(style, style)}\n")
    if article_type and article_type.strip():
        parts.append("生成类型：完整文章\n")
    if max_length is not None and max_length > 0:
        parts.append(f"文章长度：约{max_length}字\n")
    if output_format == "markdown":
        parts.append("输出格式：请使用Markdown格式输出\n")
    elif output_format == "html":
        parts.append("输出格式：请使用HTML格式输出\n")
    parts.append("\n请直接输出生成的内容，不要包含任何解释或说明。")
    return "".join(parts)


def build_title_prompt(
    content: str,
    style: str | None = None,
    count: int = 5,
    system_prompt: str | None = None,
) -> str:
    """Build the title generation prompt with a numbered output template."""
    parts: list[str] = []
    if system_prompt and system_prompt.strip():
        parts.append(f"{system_prompt}\n\n")
    parts.append(f"请根据以下文章内容生成{count}个标题：\n\n")
    parts.append(f"文章内容：\n{content}\n\n")
    if style and style.strip():
        parts.append(f"写作风格：{TITLE_STYLES.get(style, style)}\n\n")
    parts.append("请按以下格式输出标题，每个标题占一行：\n")
    for i in range(1, count + 1):
        parts.append(f"{i}. 标题{i}\n")
    parts.append("\n注意：标题要简洁有力，能够吸引读者注意，准确反映文章内容。")
    return "".join(parts)


def build_polish_prompt(content: str, system_prompt: str | None = None) -> str:
    """Build the polish prompt around the text to rewrite."""
    instruction = system_prompt if system_prompt and system_prompt.strip() else DEFAULT_POLISH_PROMPT
    return f"{instruction}\n\n需要润色的内容：\n{content}\n\n请直接返回润色后的内容："


def build_tag_prompt(
    content: str,
    limit: int,
    existing_tags: list[str] | None = None,
    role_text: str | None = None,
) -> str:
    """
    Build the tag generation prompt.

    When the site already has tags they are listed so the model prefers
    reusing them over inventing near-duplicates.

    Args:
        content: Article body
        limit: Number of tags to request
        existing_tags: Display names of tags already on the site
        role_text: Instruction overriding the default tagging role

    Returns:
        str: Prompt text
    """
    role = role_text if role_text and role_text.strip() else DEFAULT_TAG_ROLE
    parts = [
        f"请你按照以下要求：{role}\n",
        f"请你给我符合文章内容的{limit}个标签",
        "，仅返回中文标签，使用逗号或换行分隔，不要编号与解释。\n",
    ]
    if existing_tags:
        parts.append(
            "\n【重要】系统中已有以下标签，请优先从中选择合适的标签，只有当已有标签完全不匹配时才创建新标签：\n"
        )
        parts.append("、".join(existing_tags))
        parts.append("\n\n")
    parts.append(f"文章正文如下：\n{content}")
    return "".join(parts)


def parse_tags(text: str | None, limit: int) -> list[str]:
    """
    Parse a model reply into a de-duplicated tag list.

    Splits on newlines and commas (ASCII and full-width), strips list
    markers such as "1." or bullets, and keeps tags of at most 12
    characters in first-seen order.

    Args:
        text: Extracted reply text
        limit: Maximum number of tags

    Returns:
        list[str]: Tags
    """
    if not text or not text.strip():
        return []
    tags: list[str] = []
    for part in _TAG_SPLIT.split(text.replace("\r", "\n")):
        tag = part.strip()
        if not tag:
            continue
        tag = _TAG_MARKERS.sub("", tag).strip()
        if tag and len(tag) <= MAX_TAG_LENGTH and tag not in tags:
            tags.append(tag)
        if len(tags) >= limit:
            break
    return tags
