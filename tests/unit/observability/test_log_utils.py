"""
Test suite for structured logging helpers.

System role: Verification of secret masking and value truncation
"""

import logging

import pytest

from backend.observability.log_utils import (
    is_secret_field,
    log_with_context,
    mask_secret,
    safe_log_value,
)


class TestMasking:
    """Test suite for secret detection and masking."""

    @pytest.mark.parametrize("name", ["api_key", "gaode_web_key", "Authorization", "db_password", "token"])
    def test_should_detect_secret_fields(self, name: str) -> None:
        assert is_secret_field(name) is True

    @pytest.mark.parametrize("name", ["post_name", "status_code", "ai_type"])
    def test_should_pass_regular_fields(self, name: str) -> None:
        assert is_secret_field(name) is False

    def test_mask_secret_should_keep_last_four(self) -> None:
        assert mask_secret("sk-1234567890abcd") == "***abcd"

    def test_mask_secret_should_hide_short_values(self) -> None:
        assert mask_secret("short") == "***"
        assert mask_secret(None) == "None"


class TestSafeLogValue:
    """Test suite for safe_log_value()."""

    def test_should_summarize_collections(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_should_truncate_long_strings(self) -> None:
        value = safe_log_value("x" * 20, max_length=5)
        assert value == "xxxxx... (truncated, 20 total)"


class TestLogWithContext:
    """Test suite for log_with_context()."""

    def test_should_mask_secrets_in_record(self, caplog: pytest.LogCaptureFixture) -> None:
        # Arrange
        logger = logging.getLogger("tests.log_utils")

        # Act
        with caplog.at_level(logging.INFO, logger="tests.log_utils"):
            log_with_context(logger, logging.INFO, "Calling vendor", api_key="sk-1234567890abcd", post_name="hello")

        # Assert
        record = caplog.records[0]
        assert record.api_key == "***abcd"
        assert record.post_name == "hello"
