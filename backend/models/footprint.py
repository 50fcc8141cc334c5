"""
Footprint domain models and schemas.

Request/response schemas for footprint operations and the map widget
display config.

Dependencies: pydantic
System role: Footprint API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CreateFootprintRequest(BaseModel):
    """Request schema for creating a footprint."""

    name: str = Field(..., min_length=1, max_length=100, description="Place name")
    description: str | None = Field(None, max_length=500, description="Story text")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in degrees")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    address: str | None = Field(None, max_length=200, description="Address")
    footprint_type: str | None = Field(None, max_length=64, description="Category")
    image: str | None = Field(None, description="Cover image URL")
    article: str | None = Field(None, description="Linked article URL")
    author: str | None = Field(None, max_length=100, description="Owner")
    create_time: datetime | None = Field(None, description="Visit time, defaults to now")


class UpdateFootprintRequest(BaseModel):
    """Request schema for updating a footprint; omitted fields are kept."""

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    longitude: float | None = Field(None, ge=-180, le=180)
    latitude: float | None = Field(None, ge=-90, le=90)
    address: str | None = Field(None, max_length=200)
    footprint_type: str | None = Field(None, max_length=64)
    image: str | None = None
    article: str | None = None
    author: str | None = Field(None, max_length=100)
    create_time: datetime | None = None


class FootprintResponse(BaseModel):
    """Response schema for footprint operations."""

    id: uuid.UUID
    name: str
    description: str | None
    longitude: float
    latitude: float
    address: str | None
    footprint_type: str | None
    image: str | None
    article: str | None
    author: str | None
    create_time: datetime
    created_at: datetime
    updated_at: datetime


class LocationResponse(BaseModel):
    """Geocoding result in Amap's "lng,lat" form."""

    address: str
    location: str


class FootprintConfigResponse(BaseModel):
    """Display settings for the footprint map page."""

    title: str
    gaode_key: str
    describe: str
    hsla: str
    logo_name: str
    map_style: str
