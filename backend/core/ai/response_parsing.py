"""
Response and conversation parsing helpers shared by all providers.

Extracts generated text from the several JSON shapes vendors return,
normalizes conversation histories into chat message lists, and decodes
server-sent event lines from streaming responses.

Dependencies: json (stdlib)
System role: Vendor-neutral request/response normalization
"""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

VALID_ROLES = ("system", "user", "assistant")

SSE_DONE = "[DONE]"


def _dig(node: Any, *path: str | int) -> Any:
    """Walk dicts/lists along path, returning None on any miss."""
    for key in path:
        if isinstance(key, int):
            if not isinstance(node, list) or len(node) <= key:
                return None
        elif not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    return node


# Tried in order; the first string found wins, even when empty.
_CONTENT_PATHS: tuple[tuple[str | int, ...], ...] = (
    ("choices", 0, "message", "content"),
    ("choices", 0, "delta", "content"),
    ("output", "text"),
    ("data", "choices", 0, "content"),
    ("content",),
)


def extract_content(raw: str | None) -> str | None:
    """
    Extract generated text from a raw vendor response body.

    Non-JSON text is returned unchanged, as is a JSON body that matches
    none of the known shapes.

    Args:
        raw: Raw response body

    Returns:
        str | None: Generated text, or the raw input as a fallback
    """
    if raw is None or not raw.strip():
        return raw
    stripped = raw.strip()
    if not (stripped.startswith("{") or stripped.startswith("[")):
        return raw
    try:
        root = json.loads(stripped)
    except json.JSONDecodeError:
        logger.warning("Response looked like JSON but failed to parse")
        return raw

    for path in _CONTENT_PATHS:
        value = _dig(root, *path)
        if isinstance(value, str):
            return value
    return raw


def _parse_history(history: str | None) -> list[dict[str, str]]:
    """Parse history text into role/content messages without system entries."""
    if history is None or not history.strip():
        return []
    text = history.strip()
    if text.startswith("["):
        try:
            items = json.loads(text)
        except json.JSONDecodeError:
            items = None
        if isinstance(items, list):
            messages = []
            for item in items:
                if not isinstance(item, dict):
                    continue
                role = item.get("role")
                content = item.get("content")
                if role not in VALID_ROLES or role == "system":
                    continue
                if not isinstance(content, str) or not content.strip():
                    continue
                messages.append({"role": role, "content": content.strip()})
            return messages
    return [{"role": "user", "content": text}]


def build_messages(history: str | None, system_prompt: str | None) -> list[dict[str, str]]:
    """
    Build an OpenAI-style message list from a conversation history.

    History may be a JSON array of {role, content} objects or free text;
    free text becomes a single user message. System entries in the history
    are dropped in favour of the configured system prompt.

    Args:
        history: Conversation history (JSON array string or plain text)
        system_prompt: Optional system prompt placed first

    Returns:
        list[dict[str, str]]: Messages ready for a chat completions body
    """
    messages: list[dict[str, str]] = []
    if system_prompt and system_prompt.strip():
        messages.append({"role": "system", "content": system_prompt})
    messages.extend(_parse_history(history))
    return messages


def enhance_with_system_prompt(history: str | None, system_prompt: str | None) -> list[dict[str, Any]]:
    """
    Add a system prompt to a history unless it already carries one.

    Unlike build_messages, an existing system message in a JSON history is
    kept verbatim and the configured prompt is not added.

    Args:
        history: Conversation history (JSON array string or plain text)
        system_prompt: Optional system prompt

    Returns:
        list[dict]: Message list
    """
    has_prompt = bool(system_prompt and system_prompt.strip())
    text = (history or "").strip()
    if text.startswith("["):
        try:
            items = json.loads(text)
        except json.JSONDecodeError:
            items = None
        if isinstance(items, list):
            if any(isinstance(m, dict) and m.get("role") == "system" for m in items):
                return items
            if has_prompt:
                return [{"role": "system", "content": system_prompt}, *items]
            return items

    messages: list[dict[str, Any]] = []
    if has_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": history or ""})
    return messages


def parse_openai_sse_line(line: str) -> tuple[str | None, bool]:
    """
    Decode one OpenAI-format SSE line.

    Args:
        line: Raw line from the event stream

    Returns:
        tuple: (text chunk or None, whether the stream is finished)
    """
    if not line.startswith("data: "):
        return None, False
    data = line[len("data: "):].strip()
    if data == SSE_DONE:
        return None, True
    try:
        payload = json.loads(data)
    except json.JSONDecodeError:
        logger.debug("Skipping unparsable SSE line", extra={"line": data[:200]})
        return None, False
    content = _dig(payload, "choices", 0, "delta", "content")
    if isinstance(content, str) and content:
        return content, False
    return None, False


def parse_dashscope_sse_line(line: str) -> tuple[str | None, bool]:
    """
    Decode one DashScope SSE line (`data:` prefix, incremental output).

    The stream ends on `[DONE]` or on a non-null finish_reason.

    Args:
        line: Raw line from the event stream

    Returns:
        tuple: (text chunk or None, whether the stream is finished)
    """
    if not line.startswith("data:"):
        return None, False
    data = line[len("data:"):].strip()
    if data == SSE_DONE:
        return None, True
    if not data:
        return None, False
    try:
        payload = json.loads(data)
    except json.JSONDecodeError:
        logger.debug("Skipping unparsable SSE line", extra={"line": data[:200]})
        return None, False
    text = _dig(payload, "output", "text")
    finish_reason = _dig(payload, "output", "finish_reason")
    finished = finish_reason is not None and finish_reason != "null"
    if isinstance(text, str) and text:
        return text, finished
    return None, finished
