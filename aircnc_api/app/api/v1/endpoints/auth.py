"""
Token endpoint.

The web client authenticates users with its identity provider and then
exchanges the signed‑in user's email for an API token here.  The token
is sent back as ``Authorization: Bearer <token>`` on protected routes.
"""

from fastapi import APIRouter

from aircnc_api.app.core.security import create_access_token
from aircnc_api.app.schemas.token import TokenRequest, TokenResponse


router = APIRouter()


@router.post("/jwt", response_model=TokenResponse)
async def issue_token(identity: TokenRequest) -> TokenResponse:
    """Issue a token valid for one hour for the posted identity."""
    return TokenResponse(token=create_access_token(identity.model_dump(exclude_none=True)))
