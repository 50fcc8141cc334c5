"""
AI suite error handling utilities.

Provides a decorator for consistent error handling across the summary,
generation, polish, tag, conversation and post endpoints. Provider
failures are turned into typed results by the services; what reaches
this decorator is missing data or unexpected failures.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError

from backend.core.exceptions import AiProviderError, ConfigurationError
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_ai_errors(func: F) -> F:
    """
    Decorator to transform AI suite errors into HTTPExceptions.

    Maps missing posts to 404, bad input and configuration to 400,
    provider failures that escape a service to 502, and anything else to 500.
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ConfigurationError as e:
            logger.warning("AI configuration missing", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except AiProviderError as e:
            logger.error("AI provider failure", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

        except ValueError as e:
            msg = str(e).lower()
            if "not found" in msg or "does not exist" in msg:
                logger.warning("Resource not found (ValueError)", extra={"error": str(e)})
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
            else:
                logger.warning("Invalid request (ValueError)", extra={"error": str(e)})
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except ValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.errors()
            )

        except Exception as e:
            log_exception_with_context(
                logger, "Unexpected failure in AI operation", e, endpoint=func.__name__
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred during AI operation: {str(e)}"
            )

    return wrapper  # type: ignore
