"""
Persistence access, one repository per MongoDB collection.

Repositories expose equality‑filter reads and single‑document writes
only.  They translate driver failures into ``PersistenceError`` and
malformed ids into ``InvalidIdentifierError`` so that handlers never
see ``pymongo`` or ``bson`` exceptions.
"""

from .users import UserRepository
from .rooms import RoomRepository
from .bookings import BookingRepository

__all__ = ["UserRepository", "RoomRepository", "BookingRepository"]
