"""
HTTP middleware for request tracing.

CorrelationMiddleware binds an X-Correlation-ID for the request;
RequestLoggingMiddleware writes one line per completed request.

Dependencies: starlette, backend.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from backend.observability.correlation import (
    CORRELATION_HEADER,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

# Liveness checks hit these every few seconds
QUIET_PATH_SUFFIXES = ("/health", "/health/db")


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log each request once it has a status.

    Health checks are logged at DEBUG. For the SSE conversation stream the
    timing covers the time to the first byte, not the whole stream.
    """

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        path = request.url.path
        context = {
            "method": request.method,
            "path": path,
            "client_host": request.client.host if request.client else None,
            "correlation_id": get_correlation_id(),
        }

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{request.method} {path} failed",
                extra={**context, "process_time_ms": _elapsed_ms(start), "error_type": type(e).__name__},
            )
            raise

        level = logging.DEBUG if path.endswith(QUIET_PATH_SUFFIXES) else logging.INFO
        logger.log(
            level,
            f"{request.method} {path} - {response.status_code}",
            extra={**context, "status_code": response.status_code, "process_time_ms": _elapsed_ms(start)},
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind the caller's X-Correlation-ID (or a new one) and echo it back."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
