"""
Footprint API endpoints.

Routes:
- GET /footprints - Paginated, filtered list
- GET /footprints/all - Every footprint
- GET /footprints/config - Map page display config
- GET /footprints/by-name/{name} - Footprints with a given name
- GET /footprints/location/{address} - Geocode an address
- POST /footprints - Create footprint
- GET /footprints/{id} - Get single footprint
- PUT /footprints/{id} - Update footprint
- DELETE /footprints/{id} - Delete footprint

Dependencies: backend.application.services, backend.models
System role: Footprint HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from backend.application.services.footprint_service import FootprintService
from backend.api.deps.dependencies import get_footprint_service
from backend.models.common import ListResult
from backend.models.footprint import (
    CreateFootprintRequest,
    FootprintConfigResponse,
    FootprintResponse,
    LocationResponse,
    UpdateFootprintRequest,
)

from .footprint_error_handling import handle_footprint_errors
from .footprint_validators import (
    validate_address,
    validate_footprint_creation,
    validate_footprint_update,
)
from .footprint_responses import (
    map_config_to_response,
    map_footprint_to_response,
    map_footprints_to_response,
    map_page_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/footprints", tags=["footprints"])


@router.get("", response_model=ListResult[FootprintResponse])
@handle_footprint_errors
async def list_footprints(
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1, le=100),
    keyword: str | None = Query(None, description="Substring of the name"),
    footprint_type: str | None = Query(None),
    author: str | None = Query(None),
    footprint_service: FootprintService = Depends(get_footprint_service),
) -> ListResult[FootprintResponse]:
    """
    List footprints newest first with optional filters.

    Args:
        page: 1-based page number
        size: Page size
        keyword: Name substring filter
        footprint_type: Category filter
        author: Owner filter
        footprint_service: Injected FootprintService

    Returns:
        ListResult[FootprintResponse]: Page of footprints
    """
    logger.info(
        "Listing footprints",
        extra={"page": page, "size": size, "keyword": keyword, "footprint_type": footprint_type},
    )
    page_data = await footprint_service.list_footprints(
        page=page,
        size=size,
        keyword=keyword,
        footprint_type=footprint_type,
        author=author,
    )
    return map_page_to_response(page_data)


@router.get("/all", response_model=list[FootprintResponse])
@handle_footprint_errors
async def list_all_footprints(
    footprint_service: FootprintService = Depends(get_footprint_service),
) -> list[FootprintResponse]:
    """Every footprint, newest first."""
    return map_footprints_to_response(await footprint_service.list_all())


@router.get("/config", response_model=FootprintConfigResponse)
@handle_footprint_errors
async def get_footprint_config(
    footprint_service: FootprintService = Depends(get_footprint_service),
) -> FootprintConfigResponse:
    """Display settings for the map page."""
    return map_config_to_response(footprint_service.get_display_config())


@router.get("/by-name/{name}", response_model=list[FootprintResponse])
@handle_footprint_errors
async def find_footprints_by_name(
    name: str,
    footprint_service: FootprintService = Depends(get_footprint_service),
) -> list[FootprintResponse]:
    """Footprints whose name matches exactly."""
    return map_footprints_to_response(await footprint_service.find_by_name(name))


@router.get("/location/{address}", response_model=LocationResponse)
@handle_footprint_errors
async def geocode_address(
    address: str,
    footprint_service: FootprintService = Depends(get_footprint_service),
) -> LocationResponse:
    """
    Resolve an address to "lng,lat" via Amap.

    Raises:
        HTTPException(400): Blank address, missing key or Amap error
    """
    address = validate_address(address)
    location = await footprint_service.geocode(address)
    return LocationResponse(address=address, location=location)


@router.post("", response_model=FootprintResponse, status_code=201)
@handle_footprint_errors
async def create_footprint(
    request: CreateFootprintRequest,
    footprint_service: FootprintService = Depends(get_footprint_service),
) -> FootprintResponse:
    """
    Create a footprint.

    Raises:
        HTTPException(400): Invalid request
        HTTPException(500): Creation failed
    """
    validate_footprint_creation(request)

    logger.info(
        "Creating footprint",
        extra={"footprint_name": request.name, "footprint_type": request.footprint_type},
    )
    footprint = await footprint_service.create_footprint(**request.model_dump())
    return map_footprint_to_response(footprint)


@router.get("/{footprint_id}", response_model=FootprintResponse)
@handle_footprint_errors
async def get_footprint(
    footprint_id: UUID,
    footprint_service: FootprintService = Depends(get_footprint_service),
) -> FootprintResponse:
    """
    Get a footprint by ID.

    Raises:
        HTTPException(404): Footprint not found
    """
    return map_footprint_to_response(await footprint_service.get_footprint(footprint_id))


@router.put("/{footprint_id}", response_model=FootprintResponse)
@handle_footprint_errors
async def update_footprint(
    footprint_id: UUID,
    request: UpdateFootprintRequest,
    footprint_service: FootprintService = Depends(get_footprint_service),
) -> FootprintResponse:
    """
    Update the provided fields of a footprint.

    Raises:
        HTTPException(400): Nothing to update
        HTTPException(404): Footprint not found
    """
    validate_footprint_update(request)
    footprint = await footprint_service.update_footprint(
        footprint_id, **request.model_dump(exclude_unset=True)
    )
    return map_footprint_to_response(footprint)


@router.delete("/{footprint_id}", status_code=204)
@handle_footprint_errors
async def delete_footprint(
    footprint_id: UUID,
    footprint_service: FootprintService = Depends(get_footprint_service),
) -> None:
    """
    Delete a footprint.

    Raises:
        HTTPException(404): Footprint not found
    """
    await footprint_service.delete_footprint(footprint_id)
