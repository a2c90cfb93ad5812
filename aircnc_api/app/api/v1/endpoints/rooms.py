"""
Room endpoints for API v1.

Listing and reading rooms is public.  Creating and editing rooms
require a token, and a host's own listing page requires a token for
that host.  Toggling the booked flag and deleting a room are open to
any caller unless ``ENFORCE_ROOM_OWNERSHIP`` is set, in which case
these routes and ``PUT`` require the token of the room's host.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Path
from fastapi.security import HTTPAuthorizationCredentials

from aircnc_api.app.api.deps import get_room_repository
from aircnc_api.app.core.config import settings
from aircnc_api.app.core.security import (
    ensure_same_identity,
    get_current_user,
    require_matching_email,
    security,
    verify_access_token,
)
from aircnc_api.app.repositories.rooms import RoomRepository
from aircnc_api.app.schemas.common import DeleteResult, InsertResult, UpdateResult
from aircnc_api.app.schemas.room import RoomCreate, RoomStatusUpdate, RoomUpdate


router = APIRouter()


async def _check_room_owner(
    rooms: RoomRepository,
    room_id: str,
    claims: Optional[Dict[str, Any]] = None,
    credentials: Optional[HTTPAuthorizationCredentials] = None,
) -> None:
    """Enforce host ownership of ``room_id`` when the setting is on.

    A room that does not exist has no owner to protect.
    """
    if not settings.enforce_room_ownership:
        return
    if claims is None:
        claims = verify_access_token(credentials.credentials if credentials else None)
    room = await rooms.find_by_id(room_id)
    if room is None:
        return
    ensure_same_identity(claims, (room.get("host") or {}).get("email"))


@router.get("/rooms", response_model=List[Dict[str, Any]])
async def list_rooms(rooms: RoomRepository = Depends(get_room_repository)) -> List[Dict[str, Any]]:
    return await rooms.list_all()


@router.get("/rooms/{email}", response_model=List[Dict[str, Any]])
async def list_host_rooms(
    email: str = Path(..., description="Email of the host"),
    current_user: Dict[str, Any] = Depends(require_matching_email),
    rooms: RoomRepository = Depends(get_room_repository),
) -> List[Dict[str, Any]]:
    """Rooms listed by ``email``.  Only that host may ask."""
    return await rooms.list_by_host(email)


@router.get("/room/{room_id}", response_model=Optional[Dict[str, Any]])
async def get_room(
    room_id: str = Path(..., description="ID of the room"),
    rooms: RoomRepository = Depends(get_room_repository),
) -> Optional[Dict[str, Any]]:
    return await rooms.find_by_id(room_id)


@router.post("/rooms", response_model=InsertResult)
async def create_room(
    room: RoomCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    rooms: RoomRepository = Depends(get_room_repository),
) -> InsertResult:
    """Store the listing as sent.  A new room starts unbooked unless told otherwise."""
    document = room.model_dump(exclude_unset=True)
    document.setdefault("booked", room.booked)
    return await rooms.insert_one(document)


@router.patch("/rooms/status/{room_id}", response_model=UpdateResult)
async def update_room_status(
    body: RoomStatusUpdate,
    room_id: str = Path(..., description="ID of the room"),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    rooms: RoomRepository = Depends(get_room_repository),
) -> UpdateResult:
    """Set the room's ``booked`` flag.  Never creates a room."""
    await _check_room_owner(rooms, room_id, credentials=credentials)
    return await rooms.set_booked(room_id, body.status)


@router.put("/rooms/{room_id}", response_model=UpdateResult)
async def save_room(
    room: RoomUpdate,
    room_id: str = Path(..., description="ID of the room"),
    current_user: Dict[str, Any] = Depends(get_current_user),
    rooms: RoomRepository = Depends(get_room_repository),
) -> UpdateResult:
    """Merge the posted fields into the room, creating it if the id is unused."""
    await _check_room_owner(rooms, room_id, claims=current_user)
    return await rooms.upsert(room_id, room.model_dump(exclude_unset=True))


@router.delete("/rooms/{room_id}", response_model=DeleteResult)
async def delete_room(
    room_id: str = Path(..., description="ID of the room"),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    rooms: RoomRepository = Depends(get_room_repository),
) -> DeleteResult:
    await _check_room_owner(rooms, room_id, credentials=credentials)
    return await rooms.delete_one_by_id(room_id)
