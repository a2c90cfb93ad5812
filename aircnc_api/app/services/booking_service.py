"""
Booking creation with confirmation emails.

Saving a booking notifies both parties: the guest receives a booking
confirmation and the host a "room booked" notice, each quoting the new
booking id and the payment transaction id.  Email is fire and forget:
the booking is stored and reported whatever happens to the emails.
"""

import logging
from typing import List, Optional, Tuple

from fastapi import BackgroundTasks

from ..core.config import settings
from ..repositories.bookings import BookingRepository
from ..schemas.booking import BookingCreate
from ..schemas.common import InsertResult
from .notification_service import NotificationService, html_paragraph


GUEST_SUBJECT = "Booking Successful!"
HOST_SUBJECT = "Your room got booked!"

logger = logging.getLogger(__name__)


class BookingService:
    """Coordinates the booking write and the two notifications."""

    @staticmethod
    def confirmation_emails(booking_id: str, booking: BookingCreate) -> List[Tuple[str, str, str]]:
        """Return ``(subject, html_body, recipient)`` for guest and host."""
        reference = f"Booking Id: {booking_id}, TransactionId: {booking.transactionId}"
        return [
            (GUEST_SUBJECT, html_paragraph(reference), booking.guest.email),
            (HOST_SUBJECT, html_paragraph(f"{reference}. Check dashboard for more info"), booking.host),
        ]

    @staticmethod
    async def _notify(notifier: NotificationService, subject: str, html_body: str, recipient: str) -> None:
        try:
            await notifier.send(subject, html_body, recipient)
        except Exception as e:
            # The notifier already swallows delivery errors; this guards
            # against anything else so the booking response is unaffected.
            logger.error("Notification %r to %s failed: %s", subject, recipient, e)

    @classmethod
    async def create_booking(
        cls,
        repository: BookingRepository,
        notifier: NotificationService,
        booking: BookingCreate,
        background_tasks: Optional[BackgroundTasks] = None,
    ) -> InsertResult:
        """Store ``booking`` and send the confirmation emails.

        When ``background_tasks`` is given and background notification is
        enabled, the emails go out after the response has been sent.
        Otherwise they are sent one after the other before returning.
        """
        result = await repository.insert_one(booking.model_dump(exclude_unset=True))
        logger.info("Booking %s saved for guest %s", result.insertedId, booking.guest.email)

        detach = background_tasks is not None and settings.notify_in_background
        for subject, html_body, recipient in cls.confirmation_emails(result.insertedId, booking):
            if detach:
                background_tasks.add_task(cls._notify, notifier, subject, html_body, recipient)
            else:
                await cls._notify(notifier, subject, html_body, recipient)
        return result
