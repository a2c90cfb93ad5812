"""
Pydantic models for room listings.

Listings carry arbitrary presentation fields (title, images, location,
dates, bed and bathroom counts ...).  The schemas pin down the ones the
API itself depends on: the embedded ``host`` with its email, the
``booked`` flag and a numeric ``price``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import Price


class HostInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1, examples=["host@example.com"])
    name: Optional[str] = None
    image: Optional[str] = None


class RoomCreate(BaseModel):
    """Schema for creating a room listing."""

    model_config = ConfigDict(extra="allow")

    host: HostInfo
    title: Optional[str] = Field(None, examples=["Cabin by the lake"])
    location: Optional[str] = None
    image: Optional[str] = None
    # Numeric strings ("120.5") are coerced; anything else is rejected.
    price: Optional[Price] = Field(None, ge=0, examples=[120.0])
    booked: bool = False


class RoomUpdate(BaseModel):
    """Schema for ``PUT /rooms/{id}``.

    Every field is optional; only the fields sent are written.
    """

    model_config = ConfigDict(extra="allow")

    host: Optional[HostInfo] = None
    title: Optional[str] = None
    location: Optional[str] = None
    image: Optional[str] = None
    price: Optional[Price] = Field(None, ge=0)
    booked: Optional[bool] = None


class RoomStatusUpdate(BaseModel):
    """Body of ``PATCH /rooms/status/{id}``."""

    status: bool = Field(..., description="New value of the room's booked flag")
