"""
Footprint validation utilities.

Business rules not covered by the Pydantic request models.

Dependencies: backend.models.footprint
System role: Footprint business logic validation
"""

from backend.models.footprint import CreateFootprintRequest, UpdateFootprintRequest


class FootprintValidationError(ValueError):
    """Raised when footprint validation fails."""


def validate_footprint_creation(request: CreateFootprintRequest) -> None:
    """
    Validate footprint creation request.

    Raises:
        FootprintValidationError: If the name is whitespace-only
    """
    if not request.name.strip():
        raise FootprintValidationError("Footprint name cannot be empty or whitespace-only")


def validate_footprint_update(request: UpdateFootprintRequest) -> None:
    """
    Validate footprint update request.

    Raises:
        FootprintValidationError: If nothing is provided or the name is blank
    """
    if not request.model_fields_set:
        raise FootprintValidationError("At least one field must be provided for update")
    if "name" in request.model_fields_set and (request.name is None or not request.name.strip()):
        raise FootprintValidationError("Footprint name cannot be empty or whitespace-only")
    for field in ("longitude", "latitude", "create_time"):
        if field in request.model_fields_set and getattr(request, field) is None:
            raise FootprintValidationError(f"Footprint {field} cannot be null")


def validate_address(address: str | None) -> str:
    """
    Validate a geocoding address.

    Returns:
        str: Trimmed address

    Raises:
        FootprintValidationError: If the address is blank
    """
    if address is None or not address.strip():
        raise FootprintValidationError("地址参数不能为空")
    return address.strip()
