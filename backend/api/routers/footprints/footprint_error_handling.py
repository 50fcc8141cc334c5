"""
Footprint error handling utilities.

Provides a decorator for consistent error handling across footprint
endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError

from backend.core.exceptions import ConfigurationError, GeocodingError

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_footprint_errors(func: F) -> F:
    """
    Decorator to transform footprint errors into HTTPExceptions.

    Geocoding and configuration failures are client-correctable (missing
    key, unknown address) and map to 400.
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except (ConfigurationError, GeocodingError) as e:
            logger.warning("Geocoding unavailable", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

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
            logger.exception(
                "Unexpected failure in footprint operation",
                extra={"error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred during footprint operation: {str(e)}"
            )

    return wrapper  # type: ignore
