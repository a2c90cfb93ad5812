"""
Access to the ``rooms`` collection.

Rooms embed their host (``host.email``) and carry a ``booked`` flag.
The flag is set by the client after a booking is made; nothing here
ties it to the ``bookings`` collection.
"""

from typing import Any, List, Mapping

from ..core.db import ROOMS_COLLECTION
from ..schemas.common import UpdateResult
from .base import BaseRepository, Document


class RoomRepository(BaseRepository):
    collection_name = ROOMS_COLLECTION

    async def list_all(self) -> List[Document]:
        return await self.find_many()

    async def list_by_host(self, email: str) -> List[Document]:
        return await self.find_many({"host.email": email})

    async def set_booked(self, raw_id: str, booked: bool) -> UpdateResult:
        return await self.update_by_id(raw_id, {"booked": booked})

    async def upsert(self, raw_id: str, fields: Mapping[str, Any]) -> UpdateResult:
        return await self.update_by_id(raw_id, fields, upsert=True)
