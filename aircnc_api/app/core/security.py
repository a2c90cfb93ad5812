"""
Bearer token issuing and verification.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC‑SHA256 signatures and base64url encoding.  Tokens embed the
identity claims posted to ``/jwt`` plus ``iat`` and ``exp``
timestamps; they are signed with ``ACCESS_TOKEN_SECRET``.  Tokens are
interoperable with standard HS256 JWT libraries, so clients that
already hold tokens from the previous server keep working as long as
the secret is the same.

Two FastAPI dependencies build on this:

* ``get_current_user`` – rejects the request with 401 unless a valid
  bearer token is present, and returns its claims.
* ``require_matching_email`` – additionally rejects with 403 when the
  token's ``email`` claim differs from the ``email`` path parameter.
"""

import base64
import hashlib
import hmac
import json
import time
from typing import Any, Dict, Optional

from fastapi import Depends, Path
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from .errors import ForbiddenError, InvalidInputError, UnauthorizedError


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(identity: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed token for ``identity``.

    Parameters
    ----------
    identity : dict
        Claims to embed (at minimum ``{"email": ...}``).  The dict is
        copied; ``iat`` and ``exp`` are added to the copy.
    expires_delta : Optional[int]
        Lifetime in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60`` (one hour).

    Returns
    -------
    str
        ``header.payload.signature``, each part base64url encoded.
    """
    if not identity:
        raise InvalidInputError("identity payload is required")
    to_encode = dict(identity)
    now = int(time.time())
    exp_seconds = expires_delta or settings.access_token_expire_minutes * 60
    to_encode["iat"] = now
    to_encode["exp"] = now + exp_seconds
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify a token and return its claims, or ``None`` if it is not valid.

    The signature is checked in constant time before the payload is
    parsed.  Tokens without ``exp`` or past their ``exp`` are invalid.
    """
    try:
        header_b64, payload_b64, signature_b64 = token.split(".")
        header = json.loads(_b64_url_decode(header_b64).decode("utf-8"))
        if header.get("alg") != settings.algorithm:
            return None
        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        expected_sig = _sign(signing_input, settings.secret_key)
        if not hmac.compare_digest(expected_sig, _b64_url_decode(signature_b64)):
            return None
        claims = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        if not isinstance(claims, dict):
            return None
        if claims.get("exp") is None or int(claims["exp"]) <= int(time.time()):
            return None
        return claims
    except (ValueError, TypeError, AttributeError):
        # ValueError covers bad base64, bad JSON and a wrong number of parts.
        return None


def verify_access_token(token: Optional[str]) -> Dict[str, Any]:
    """Return the claims of ``token`` or raise ``UnauthorizedError``."""
    if not token:
        raise UnauthorizedError()
    claims = decode_access_token(token)
    if claims is None:
        raise UnauthorizedError()
    return claims


security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, Any]:
    """Dependency returning the verified claims of the bearer token.

    Requests without an ``Authorization: Bearer`` header, or with a
    token that fails verification, are rejected with 401 before the
    handler body runs.
    """
    if credentials is None:
        raise UnauthorizedError()
    return verify_access_token(credentials.credentials)


def ensure_same_identity(claims: Dict[str, Any], email: Optional[str]) -> None:
    """Raise ``ForbiddenError`` unless the token's email claim equals ``email``."""
    if not email or claims.get("email") != email:
        raise ForbiddenError()


def require_matching_email(
    email: str = Path(..., description="Email the caller must be authenticated as"),
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> Dict[str, Any]:
    """Dependency for routes keyed by the caller's own email."""
    ensure_same_identity(current_user, email)
    return current_user
