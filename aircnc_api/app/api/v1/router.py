"""
Top‑level router for version 1 of the API.

Aggregates the resource routers.  Rooms and bookings declare their
full paths themselves because they span several roots (``/rooms``,
``/room``, ``/rooms/status``; ``/bookings``, ``/bookings/host``).
"""

from fastapi import APIRouter

from .endpoints import auth, bookings, payments, rooms, users


router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(rooms.router, tags=["rooms"])
router.include_router(payments.router, tags=["payments"])
router.include_router(bookings.router, tags=["bookings"])
