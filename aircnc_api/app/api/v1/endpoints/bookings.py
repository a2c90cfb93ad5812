"""
Booking endpoints for API v1.

Guests list their trips by their own email, hosts list the bookings
of their rooms by theirs.  Without an ``email`` query parameter both
lists are empty.  Saving a booking emails guest and host.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Path, Query

from aircnc_api.app.api.deps import get_booking_repository, get_notification_service
from aircnc_api.app.repositories.bookings import BookingRepository
from aircnc_api.app.schemas.booking import BookingCreate
from aircnc_api.app.schemas.common import DeleteResult, InsertResult
from aircnc_api.app.services.booking_service import BookingService
from aircnc_api.app.services.notification_service import NotificationService


router = APIRouter()


@router.get("/bookings", response_model=List[Dict[str, Any]])
async def list_guest_bookings(
    email: Optional[str] = Query(None, description="Email of the guest"),
    bookings: BookingRepository = Depends(get_booking_repository),
) -> List[Dict[str, Any]]:
    if not email:
        return []
    return await bookings.list_by_guest(email)


@router.get("/bookings/host", response_model=List[Dict[str, Any]])
async def list_host_bookings(
    email: Optional[str] = Query(None, description="Email of the host"),
    bookings: BookingRepository = Depends(get_booking_repository),
) -> List[Dict[str, Any]]:
    if not email:
        return []
    return await bookings.list_by_host(email)


@router.post("/bookings", response_model=InsertResult)
async def create_booking(
    booking: BookingCreate,
    background_tasks: BackgroundTasks,
    bookings: BookingRepository = Depends(get_booking_repository),
    notifier: NotificationService = Depends(get_notification_service),
) -> InsertResult:
    """Save a paid booking and email both parties.

    The response reports the insert regardless of whether the emails
    are delivered.
    """
    return await BookingService.create_booking(bookings, notifier, booking, background_tasks)


@router.delete("/bookings/{booking_id}", response_model=DeleteResult)
async def delete_booking(
    booking_id: str = Path(..., description="ID of the booking"),
    bookings: BookingRepository = Depends(get_booking_repository),
) -> DeleteResult:
    return await bookings.delete_one_by_id(booking_id)
