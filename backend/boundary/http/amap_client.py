"""
Amap (Gaode) geocoding client.

Resolves a free-text address to "longitude,latitude".

Dependencies: httpx, backend.core.exceptions
System role: Geocoding for footprint creation
"""

import logging

import httpx

from backend.core.exceptions import GeocodingError

logger = logging.getLogger(__name__)

AMAP_GEOCODE_URL = "https://restapi.amap.com/v3/geocode/geo"


class AmapGeocodingClient:
    """Thin wrapper over the Amap v3 geocode endpoint."""

    def __init__(self, client: httpx.AsyncClient, geocode_url: str = AMAP_GEOCODE_URL) -> None:
        """
        Initialize geocoding client.

        Args:
            client: Shared async HTTP client
            geocode_url: Endpoint URL, overridable for tests or proxies
        """
        self._client = client
        self._geocode_url = geocode_url

    async def geocode(self, address: str, web_key: str) -> str:
        """
        Geocode an address.

        Args:
            address: Address text
            web_key: Amap web service key

        Returns:
            str: "lng,lat" of the first match

        Raises:
            GeocodingError: On transport failure, error status or no match
        """
        try:
            response = await self._client.get(
                self._geocode_url, params={"key": web_key, "address": address}
            )
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error("Amap returned error status", extra={"address": address, "status_code": status_code})
            raise GeocodingError(
                f"调用高德地图API失败: HTTP {status_code}", {"status_code": status_code}
            ) from e
        except httpx.HTTPError as e:
            # httpx messages carry the request URL, which holds the web key
            logger.error("Amap request failed", extra={"address": address, "error_type": type(e).__name__})
            raise GeocodingError(f"调用高德地图API失败: {type(e).__name__}") from e
        except ValueError as e:
            raise GeocodingError(f"解析高德地图响应失败: {e}") from e

        if str(body.get("status")) == "1":
            geocodes = body.get("geocodes") or []
            if geocodes:
                location = str(geocodes[0].get("location") or "")
                parts = location.split(",")
                if len(parts) >= 2:
                    return f"{parts[0]},{parts[1]}"

        info = body.get("info", "")
        logger.warning("Amap returned an error", extra={"address": address, "info": info})
        raise GeocodingError(f"高德地图API返回错误: {info}", {"info": info})
