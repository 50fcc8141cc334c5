"""
Test suite for the exception hierarchy.

System role: Verification of error messages and context details
"""

import pytest

import backend.core as core
from backend.core.exceptions import (
    AiProviderError,
    ConfigurationError,
    GeocodingError,
    HaloPluginException,
    SteamApiError,
)


class TestExceptionHierarchy:
    """Test suite for HaloPluginException subclasses."""

    def test_base_str_should_include_details(self) -> None:
        error = HaloPluginException("boom", {"key": "value"})
        assert str(error) == "boom | Details: {'key': 'value'}"

    def test_configuration_error_str_should_be_message_only(self) -> None:
        error = ConfigurationError("Steam API Key 未配置", setting="api_key")

        assert str(error) == "Steam API Key 未配置"
        assert error.details == {"setting": "api_key"}

    def test_ai_provider_error_should_carry_status(self) -> None:
        error = AiProviderError("zhipu", "chat", "bad gateway", status_code=502)

        assert error.details["provider"] == "zhipu"
        assert error.details["status_code"] == 502

    @pytest.mark.parametrize("exc_type,service", [(GeocodingError, "amap"), (SteamApiError, "steam")])
    def test_external_errors_should_tag_service(self, exc_type: type, service: str) -> None:
        error = exc_type("failed")

        assert error.service == service
        assert str(error) == "failed"

    def test_package_should_export_raised_exceptions_only(self) -> None:
        assert sorted(core.__all__) == [
            "AiProviderError",
            "ConfigurationError",
            "ExternalServiceError",
            "GeocodingError",
            "HaloPluginException",
            "SteamApiError",
        ]
