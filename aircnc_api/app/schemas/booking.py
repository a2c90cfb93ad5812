"""
Pydantic models for bookings.

A booking is written once, after the guest has completed payment on
the client.  ``guest`` embeds the guest's contact details, ``host`` is
the host's email and ``transactionId`` is the payment provider's
reference.  Stay details (room id, dates, price) are stored as sent.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import Price


class GuestInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1, examples=["guest@example.com"])
    name: Optional[str] = None
    image: Optional[str] = None


class BookingCreate(BaseModel):
    """Schema for creating a booking."""

    model_config = ConfigDict(extra="allow")

    guest: GuestInfo
    host: str = Field(..., min_length=1, description="Email of the room's host")
    transactionId: str = Field(..., min_length=1, description="Payment provider transaction reference")
    roomId: Optional[str] = None
    price: Optional[Price] = Field(None, ge=0)
