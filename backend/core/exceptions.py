"""
Exception hierarchy for the Halo plugin suite.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class HaloPluginException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(HaloPluginException):
    """Raised when a required setting (API key, ID) is missing."""

    def __init__(self, message: str, setting: str | None = None) -> None:
        details = {"setting": setting} if setting else None
        super().__init__(message, details)

    def __str__(self) -> str:
        return self.message


class AiProviderError(HaloPluginException):
    """
    Raised when an LLM provider call fails.

    Replaces in-band error strings: callers get the provider, the operation
    and the HTTP status instead of parsing text.
    """

    def __init__(
        self,
        provider: str,
        operation: str,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
        kind: str = "http",
    ) -> None:
        """
        Initialize provider error.

        Args:
            provider: Provider type key (openAi, zhipuAi, dashScope)
            operation: Failed operation (chat, multi_turn_chat, stream_chat)
            message: Underlying error message
            status_code: HTTP status returned by the vendor, if any
            response_body: Vendor error body, truncated by callers when logging
            kind: Failure class: http, timeout, connection or config
        """
        self.provider = provider
        self.operation = operation
        self.status_code = status_code
        self.response_body = response_body
        self.kind = kind
        details: dict[str, Any] = {"provider": provider, "operation": operation, "kind": kind}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)


class ExternalServiceError(HaloPluginException):
    """Raised when a non-LLM upstream API (Amap, Steam) fails."""

    def __init__(
        self,
        message: str,
        service: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["service"] = service
        self.service = service
        super().__init__(message, details)

    def __str__(self) -> str:
        return self.message


class GeocodingError(ExternalServiceError):
    """Raised when Amap geocoding returns an error or an unusable body."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "amap", details)


class SteamApiError(ExternalServiceError):
    """Raised when a Steam Web API call fails."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "steam", details)
