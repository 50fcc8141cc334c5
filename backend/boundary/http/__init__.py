"""
Outbound HTTP clients for third-party APIs.

Exports:
  - AmapGeocodingClient: Address to coordinates via Amap
  - SteamApiClient: Steam Web API and store lookups
"""

from backend.boundary.http.amap_client import AmapGeocodingClient
from backend.boundary.http.steam_client import SteamApiClient

__all__ = ["AmapGeocodingClient", "SteamApiClient"]
