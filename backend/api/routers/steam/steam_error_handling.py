"""
Steam view error handling utilities.

Provides a decorator mapping configuration gaps and Steam Web API failures
onto HTTP errors.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from backend.core.exceptions import ConfigurationError, SteamApiError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_steam_errors(func: F) -> F:
    """
    Decorator to transform Steam errors into HTTPExceptions.

    Missing key or Steam ID maps to 400, an upstream failure to 502.
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ConfigurationError as e:
            logger.warning("Steam not configured", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except SteamApiError as e:
            logger.error("Steam API failure", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

        except ValueError as e:
            logger.warning("Invalid request (ValueError)", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except Exception as e:
            logger.exception("Unexpected failure in Steam operation", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred during Steam operation: {str(e)}"
            )

    return wrapper  # type: ignore
