"""Access to the ``bookings`` collection."""

from typing import List

from ..core.db import BOOKINGS_COLLECTION
from .base import BaseRepository, Document


class BookingRepository(BaseRepository):
    collection_name = BOOKINGS_COLLECTION

    async def list_by_guest(self, email: str) -> List[Document]:
        return await self.find_many({"guest.email": email})

    async def list_by_host(self, email: str) -> List[Document]:
        # Bookings store the host as a plain email string.
        return await self.find_many({"host": email})
