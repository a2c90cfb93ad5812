"""
Pydantic models for user records.

A user record is keyed by email and carries the role chosen at
sign‑up (``host`` or ``guest``) plus whatever profile fields the
client stores.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserUpsert(BaseModel):
    """Body of ``PUT /users/{email}``.

    Fields present in the body are merged into the stored record.  The
    record's ``email`` always comes from the path.
    """

    model_config = ConfigDict(extra="allow")

    role: Optional[str] = Field(None, examples=["host"])
