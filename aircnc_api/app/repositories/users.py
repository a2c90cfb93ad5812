"""Access to the ``users`` collection."""

from typing import Any, Mapping, Optional

from ..core.db import USERS_COLLECTION
from ..schemas.common import UpdateResult
from .base import BaseRepository, Document


class UserRepository(BaseRepository):
    collection_name = USERS_COLLECTION

    async def get_by_email(self, email: str) -> Optional[Document]:
        return await self.find_one({"email": email})

    async def upsert_by_email(self, email: str, fields: Mapping[str, Any]) -> UpdateResult:
        """Create or merge the record keyed by ``email``.

        Calling this twice with different roles leaves one record
        carrying the latest role.
        """
        payload = dict(fields)
        payload["email"] = email
        return await self.update_one({"email": email}, payload, upsert=True)
