"""
Footprint response mapping utilities.

Dependencies: backend.models.footprint, backend.models.common
System role: Footprint response transformation
"""

from typing import Any

from backend.models.common import ListResult
from backend.models.footprint import FootprintConfigResponse, FootprintResponse


def map_footprint_to_response(footprint_data: dict[str, Any]) -> FootprintResponse:
    """
    Transform footprint data dictionary into FootprintResponse.

    Args:
        footprint_data: Dictionary as returned by FootprintService

    Returns:
        FootprintResponse: Pydantic model for API response
    """
    return FootprintResponse(**footprint_data)


def map_footprints_to_response(footprints_data: list[dict[str, Any]]) -> list[FootprintResponse]:
    return [map_footprint_to_response(f) for f in footprints_data]


def map_page_to_response(page_data: dict[str, Any]) -> ListResult[FootprintResponse]:
    """Transform a {page, size, total, items} dict into ListResult."""
    return ListResult[FootprintResponse](
        page=page_data["page"],
        size=page_data["size"],
        total=page_data["total"],
        items=map_footprints_to_response(page_data["items"]),
    )


def map_config_to_response(config: dict[str, Any]) -> FootprintConfigResponse:
    return FootprintConfigResponse(**config)
