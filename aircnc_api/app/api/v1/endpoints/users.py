"""
User endpoints for API v1.

Users are created by the client right after sign‑up and updated when
they switch role (for example becoming a host).  Both go through the
same upsert keyed by email.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Path

from aircnc_api.app.api.deps import get_user_repository
from aircnc_api.app.repositories.users import UserRepository
from aircnc_api.app.schemas.common import UpdateResult
from aircnc_api.app.schemas.user import UserUpsert


router = APIRouter()


@router.get("/{email}", response_model=Optional[Dict[str, Any]])
async def get_user(
    email: str = Path(..., description="Email of the user"),
    users: UserRepository = Depends(get_user_repository),
) -> Optional[Dict[str, Any]]:
    """Return the user record, or ``null`` when there is none."""
    return await users.get_by_email(email)


@router.put("/{email}", response_model=UpdateResult)
async def save_user(
    user: UserUpsert,
    email: str = Path(..., description="Email of the user"),
    users: UserRepository = Depends(get_user_repository),
) -> UpdateResult:
    """Create the user or merge the posted fields into the existing record.

    The email in the path is the key; an ``email`` field in the body is
    ignored in its favour.
    """
    return await users.upsert_by_email(email, user.model_dump(exclude_unset=True))
