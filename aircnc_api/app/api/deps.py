"""
Request dependencies for shared clients.

The MongoDB database handle, the payment client and the email client
are created once at startup and kept on ``app.state``.  Handlers obtain
them (or repositories bound to them) through these functions, which
tests replace with ``app.dependency_overrides``.
"""

from typing import Any

from fastapi import Depends, Request

from ..core.errors import PersistenceError
from ..repositories import BookingRepository, RoomRepository, UserRepository
from ..services.notification_service import NotificationService
from ..services.payment_service import PaymentService


def get_database(request: Request) -> Any:
    database = getattr(request.app.state, "db", None)
    if database is None:
        # Startup could not build a client; see ``core.db.connect_db``.
        raise PersistenceError()
    return database


def get_user_repository(database: Any = Depends(get_database)) -> UserRepository:
    return UserRepository(database)


def get_room_repository(database: Any = Depends(get_database)) -> RoomRepository:
    return RoomRepository(database)


def get_booking_repository(database: Any = Depends(get_database)) -> BookingRepository:
    return BookingRepository(database)


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payments


def get_notification_service(request: Request) -> NotificationService:
    return request.app.state.notifier
