"""
Observability module.

Provides logging configuration, safe structured-logging helpers,
correlation ID tracking and request middleware.
"""

from backend.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from backend.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
]
