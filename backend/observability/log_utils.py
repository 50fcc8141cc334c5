"""
Logging utilities for safe structured logging.

Converts arbitrary values to bounded strings and masks credentials
before they reach a log record.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

SECRET_MARKERS = ("key", "token", "secret", "password", "authorization")


def is_secret_field(name: str) -> bool:
    lowered = name.lower()
    return any(marker in lowered for marker in SECRET_MARKERS)


def mask_secret(value: Any) -> str:
    """
    Mask a credential, keeping only its last four characters.

    Args:
        value: Secret value

    Returns:
        str: "None", "***" or "***abcd"
    """
    if value is None:
        return "None"
    text = str(value)
    if len(text) <= 8:
        return "***"
    return f"***{text[-4:]}"


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Safely convert any value to a string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple, set)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def _safe_context(context: dict[str, Any]) -> dict[str, str]:
    return {
        key: mask_secret(val) if is_secret_field(key) else safe_log_value(val)
        for key, val in context.items()
    }


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with structured context.

    Values are truncated, and fields that look like credentials are masked.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value pairs
    """
    logger.log(level, message, extra=_safe_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with traceback and context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context
    """
    safe_context = _safe_context(context)
    safe_context.update({
        "error_type": type(exc).__name__,
        "error_msg": safe_log_value(str(exc)),
    })
    logger.exception(message, extra=safe_context)
