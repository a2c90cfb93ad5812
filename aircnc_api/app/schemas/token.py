"""Request and response bodies for ``POST /jwt``."""

from pydantic import BaseModel, ConfigDict, Field


class TokenRequest(BaseModel):
    """Identity to embed in the token.

    Only ``email`` is required; any other claims the client sends
    (display name, photo URL ...) are signed into the token as well.
    """

    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1, examples=["guest@example.com"])


class TokenResponse(BaseModel):
    token: str
