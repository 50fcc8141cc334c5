"""
Correlation ID context.

Holds the current request's correlation ID in a ContextVar so it follows
the request across awaits and into background work started from it.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

from contextvars import ContextVar
import uuid

CORRELATION_HEADER = "X-Correlation-ID"

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Set correlation ID in context.

    Args:
        correlation_id: Optional correlation ID (generates new if None or blank)

    Returns:
        str: The correlation ID that was set
    """
    value = (correlation_id or "").strip() or str(uuid.uuid4())
    correlation_id_ctx.set(value)
    return value


def get_correlation_id() -> str:
    """Current correlation ID, empty outside a request."""
    return correlation_id_ctx.get()


def clear_correlation_id() -> None:
    """Clear correlation ID from context."""
    correlation_id_ctx.set("")
