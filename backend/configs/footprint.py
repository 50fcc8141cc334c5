"""
Footprint configuration settings.

Map page display values and Amap (Gaode) keys.

Dependencies: pydantic, pydantic_settings
System role: Footprint map and geocoding configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class FootprintSettings(BaseSettings):
    """Footprint map configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FOOTPRINT_",
        case_sensitive=False,
        extra="ignore",
    )

    title: str = Field(default="Handsome足迹", description="Map page title")
    gaode_key: str | None = Field(default=None, description="Amap JS API key")
    gaode_web_key: str | None = Field(default=None, description="Amap web service key used for geocoding")
    describe: str = Field(default="每一处足迹都充满了故事，那是对人生的思考和无限的风光。")
    hsla: str = Field(default="109,42%,60%", description="Marker colour as h,s,l")
    logo_name: str | None = Field(default=None)
    map_style: str | None = Field(default=None)
    geocode_url: str = Field(default="https://restapi.amap.com/v3/geocode/geo")
