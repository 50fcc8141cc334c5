"""Steam view request validation."""

import re

VANITY_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]{2,32}$")


class SteamValidationError(ValueError):
    """Raised when a Steam request fails validation."""


def validate_vanity_name(vanity_name: str) -> str:
    """
    Validate a Steam custom profile name.

    Returns:
        str: Trimmed name

    Raises:
        SteamValidationError: Blank or malformed name
    """
    vanity_name = vanity_name.strip()
    if not vanity_name:
        raise SteamValidationError("Vanity name cannot be empty")
    if not VANITY_NAME_PATTERN.match(vanity_name):
        raise SteamValidationError(
            "Vanity name must be 2-32 letters, digits, underscores or hyphens"
        )
    return vanity_name
