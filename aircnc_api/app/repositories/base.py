"""
Shared repository behaviour.

``BaseRepository`` wraps one collection and implements the five
primitive operations every resource needs: find one, find many, insert
one, update one (``$set`` merge, optionally upserting) and delete one
by id.  Nothing here spans more than one document and no operation is
transactional; concurrent writes to the same document are resolved by
MongoDB as last write wins.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from bson import ObjectId
from pymongo.errors import PyMongoError

from ..core.db import parse_object_id
from ..core.errors import PersistenceError
from ..schemas.common import DeleteResult, InsertResult, UpdateResult


Document = Dict[str, Any]


def serialize_document(value: Any) -> Any:
    """Return ``value`` with every ``ObjectId`` rendered as a string."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, Mapping):
        return {k: serialize_document(v) for k, v in value.items()}
    if isinstance(value, list):
        return [serialize_document(v) for v in value]
    return value


def _writable(fields: Mapping[str, Any]) -> Document:
    # The id is owned by the database; a client‑supplied ``_id`` would
    # either be rejected by MongoDB or silently change the key.
    return {k: v for k, v in fields.items() if k != "_id"}


class BaseRepository:
    """Single‑collection access with driver errors translated."""

    collection_name: str = ""

    def __init__(self, database: Any) -> None:
        self.collection = database[self.collection_name]
        self.logger = logging.getLogger(f"{__name__}.{self.collection_name}")

    def _failed(self, operation: str, error: PyMongoError) -> PersistenceError:
        self.logger.error("%s on %s failed: %s", operation, self.collection_name, error)
        return PersistenceError()

    async def find_one(self, query: Mapping[str, Any]) -> Optional[Document]:
        try:
            document = await self.collection.find_one(dict(query))
        except PyMongoError as e:
            raise self._failed("find_one", e) from e
        return serialize_document(document) if document is not None else None

    async def find_many(self, query: Optional[Mapping[str, Any]] = None) -> List[Document]:
        try:
            cursor = self.collection.find(dict(query or {}))
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise self._failed("find", e) from e
        return [serialize_document(d) for d in documents]

    async def find_by_id(self, raw_id: str) -> Optional[Document]:
        return await self.find_one({"_id": parse_object_id(raw_id)})

    async def insert_one(self, document: Mapping[str, Any]) -> InsertResult:
        try:
            result = await self.collection.insert_one(_writable(document))
        except PyMongoError as e:
            raise self._failed("insert_one", e) from e
        self.logger.debug("Inserted %s into %s", result.inserted_id, self.collection_name)
        return InsertResult.from_driver(result)

    async def update_one(
        self,
        query: Mapping[str, Any],
        fields: Mapping[str, Any],
        upsert: bool = False,
    ) -> UpdateResult:
        """Merge ``fields`` into the document matching ``query``.

        With ``upsert`` a missing document is created from the equality
        fields of ``query`` plus ``fields``.  An empty ``fields`` mapping
        is a no‑op that reports zero matches, since MongoDB rejects an
        empty ``$set``.
        """
        payload = _writable(fields)
        if not payload:
            return UpdateResult(matchedCount=0, modifiedCount=0)
        try:
            result = await self.collection.update_one(dict(query), {"$set": payload}, upsert=upsert)
        except PyMongoError as e:
            raise self._failed("update_one", e) from e
        return UpdateResult.from_driver(result)

    async def update_by_id(self, raw_id: str, fields: Mapping[str, Any], upsert: bool = False) -> UpdateResult:
        return await self.update_one({"_id": parse_object_id(raw_id)}, fields, upsert=upsert)

    async def delete_one_by_id(self, raw_id: str) -> DeleteResult:
        """Delete by id.  A well‑formed id that matches nothing yields ``deletedCount == 0``."""
        object_id = parse_object_id(raw_id)
        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            raise self._failed("delete_one", e) from e
        return DeleteResult.from_driver(result)
