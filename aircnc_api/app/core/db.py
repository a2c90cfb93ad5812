"""
MongoDB integration.

A single ``AsyncMongoClient`` is created at application startup
(``connect_db``), shared by every request task and closed on shutdown
(``close_db``).  The client is configured for the Stable API v1 in
strict mode.  Collections are not created up front: MongoDB creates
``users``, ``rooms`` and ``bookings`` on first write and there are no
schema migrations.
"""

import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import ConfigurationError, PyMongoError
from pymongo.server_api import ServerApi

from .config import settings
from .errors import InvalidIdentifierError


USERS_COLLECTION = "users"
ROOMS_COLLECTION = "rooms"
BOOKINGS_COLLECTION = "bookings"

logger = logging.getLogger(__name__)


def create_client(uri: Optional[str] = None) -> AsyncMongoClient:
    """Build a client without opening any connection yet."""
    return AsyncMongoClient(
        uri or settings.mongo_uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )


async def ping(client: AsyncMongoClient) -> bool:
    """Ask the deployment to respond.  Failures are logged, not raised.

    The API keeps serving when the ping fails; individual requests will
    report persistence errors until the database becomes reachable.
    """
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        logger.error("MongoDB ping failed: %s", e)
        return False
    logger.info("Pinged your deployment. You successfully connected to MongoDB!")
    return True


async def connect_db(
    uri: Optional[str] = None,
    database_name: Optional[str] = None,
) -> tuple[Optional[AsyncMongoClient], Optional[AsyncDatabase]]:
    """Create the process‑wide client and return it with the app database.

    An unusable connection string (for example blank credentials) is
    logged and ``(None, None)`` is returned, so the server still starts
    and database routes answer with a persistence error.
    """
    try:
        client = create_client(uri)
    except ConfigurationError as e:
        logger.error("MongoDB is not configured: %s", e)
        return None, None
    await ping(client)
    return client, client[database_name or settings.database_name]


async def close_db(client: Optional[AsyncMongoClient]) -> None:
    if client is not None:
        await client.close()


def parse_object_id(raw_id: str) -> ObjectId:
    """Convert a path parameter to an ``ObjectId``.

    Raises
    ------
    InvalidIdentifierError
        If ``raw_id`` is not a 24‑character hex string.
    """
    try:
        return ObjectId(raw_id)
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifierError(str(raw_id)) from e
