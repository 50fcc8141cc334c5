"""
Footprint service orchestrator.

Coordinates footprint CRUD, filtered listing and address geocoding.

Dependencies: backend.boundary.db.CRUD, backend.boundary.http.amap_client
System role: Footprint use case orchestration
"""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.base import utc_now
from backend.boundary.db.CRUD.footprint_crud import footprint_crud
from backend.boundary.db.models.footprint_model import FootprintModel
from backend.boundary.http.amap_client import AmapGeocodingClient
from backend.configs.footprint import FootprintSettings
from backend.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _to_dict(footprint: FootprintModel) -> dict:
    return {
        "id": footprint.id,
        "name": footprint.name,
        "description": footprint.description,
        "longitude": footprint.longitude,
        "latitude": footprint.latitude,
        "address": footprint.address,
        "footprint_type": footprint.footprint_type,
        "image": footprint.image,
        "article": footprint.article,
        "author": footprint.author,
        "create_time": footprint.create_time,
        "created_at": footprint.created_at,
        "updated_at": footprint.updated_at,
    }


class FootprintService:
    """Footprint service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        geocoder: AmapGeocodingClient,
        settings: FootprintSettings,
    ) -> None:
        """
        Initialize footprint service.

        Args:
            db: Async SQLAlchemy session
            geocoder: Amap geocoding client
            settings: Footprint settings (keys and display values)
        """
        self.db = db
        self.geocoder = geocoder
        self.settings = settings

    async def create_footprint(self, create_time: datetime | None = None, **fields) -> dict:
        """
        Create a footprint.

        Args:
            create_time: Visit time, defaults to now
            **fields: Remaining footprint columns

        Returns:
            dict: Created footprint
        """
        try:
            footprint = await footprint_crud.create(
                self.db, create_time=create_time or utc_now(), **fields
            )
            logger.info(
                "Footprint created",
                extra={"footprint_id": str(footprint.id), "footprint_name": footprint.name},
            )
            return _to_dict(footprint)
        except Exception as e:
            logger.error("Failed to create footprint", extra={"error": str(e)})
            raise

    async def get_footprint(self, footprint_id: UUID) -> dict:
        """
        Get footprint by ID.

        Raises:
            ValueError: If footprint not found
        """
        footprint = await footprint_crud.get_by_id(self.db, footprint_id)
        if footprint is None:
            raise ValueError(f"Footprint {footprint_id} does not exist")
        return _to_dict(footprint)

    async def update_footprint(self, footprint_id: UUID, **fields) -> dict:
        """
        Update the given footprint fields.

        Args:
            footprint_id: Footprint UUID
            **fields: Columns to change

        Returns:
            dict: Updated footprint

        Raises:
            ValueError: If footprint not found
        """
        try:
            footprint = await footprint_crud.update_by_id(self.db, footprint_id, **fields)
            if footprint is None:
                raise ValueError(f"Footprint {footprint_id} does not exist")
            logger.info(
                "Footprint updated",
                extra={"footprint_id": str(footprint_id), "fields": sorted(fields)},
            )
            return _to_dict(footprint)
        except ValueError:
            raise
        except Exception as e:
            logger.error(
                "Failed to update footprint",
                extra={"error": str(e), "footprint_id": str(footprint_id)},
            )
            raise

    async def delete_footprint(self, footprint_id: UUID) -> None:
        """
        Delete a footprint.

        Raises:
            ValueError: If footprint not found
        """
        deleted = await footprint_crud.delete_by_id(self.db, footprint_id)
        if not deleted:
            raise ValueError(f"Footprint {footprint_id} does not exist")
        logger.info("Footprint deleted", extra={"footprint_id": str(footprint_id)})

    async def list_footprints(
        self,
        page: int = 1,
        size: int = 10,
        keyword: str | None = None,
        footprint_type: str | None = None,
        author: str | None = None,
    ) -> dict:
        """
        Page through footprints, newest first.

        Args:
            page: 1-based page number
            size: Page size
            keyword: Substring of the name
            footprint_type: Exact category
            author: Exact owner

        Returns:
            dict: {page, size, total, items}
        """
        offset = (page - 1) * size
        items = await footprint_crud.list_filtered(
            self.db,
            keyword=keyword,
            footprint_type=footprint_type,
            author=author,
            limit=size,
            offset=offset,
        )
        total = await footprint_crud.count_filtered(
            self.db, keyword=keyword, footprint_type=footprint_type, author=author
        )
        return {
            "page": page,
            "size": size,
            "total": total,
            "items": [_to_dict(f) for f in items],
        }

    async def list_all(self) -> list[dict]:
        """Every footprint, newest first."""
        return [_to_dict(f) for f in await footprint_crud.list_filtered(self.db)]

    async def find_by_name(self, name: str) -> list[dict]:
        """Footprints with exactly this name."""
        return [_to_dict(f) for f in await footprint_crud.list_by_name(self.db, name)]

    async def geocode(self, address: str) -> str:
        """
        Resolve an address to "lng,lat".

        Args:
            address: Non-blank address

        Returns:
            str: Coordinates of the first match

        Raises:
            ConfigurationError: If no Amap web key is configured
            GeocodingError: If Amap rejects the request or finds nothing
        """
        key = self.settings.gaode_web_key
        if not key or not key.strip():
            raise ConfigurationError("高德地图Key未配置", setting="FOOTPRINT_GAODE_WEB_KEY")
        location = await self.geocoder.geocode(address, key)
        logger.info("Address geocoded", extra={"address": address, "location": location})
        return location

    def get_display_config(self) -> dict:
        """Map page display values."""
        s = self.settings
        return {
            "title": s.title,
            "gaode_key": s.gaode_key or "",
            "describe": s.describe,
            "hsla": s.hsla,
            "logo_name": s.logo_name or "",
            "map_style": s.map_style or "",
        }
