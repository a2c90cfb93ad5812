"""
Application error taxonomy and its HTTP mapping.

Handlers and lower layers raise these exceptions instead of building
HTTP responses themselves.  ``register_exception_handlers`` converts
them to the ``{"error": true, "message": ...}`` body that existing
clients expect.  Anything not in the taxonomy becomes a generic 500 so
that driver or provider internals never reach the caller.
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors with a defined HTTP outcome."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "internal server error"
    headers: Optional[Dict[str, str]] = None

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UnauthorizedError(AppError):
    """Missing, malformed, expired or badly signed bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "unauthorized access"
    headers = {"WWW-Authenticate": "Bearer"}


class ForbiddenError(AppError):
    """Valid token whose identity does not match the requested resource."""

    status_code = status.HTTP_403_FORBIDDEN
    message = "forbidden access"


class InvalidInputError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "invalid input"


class InvalidIdentifierError(InvalidInputError):
    """A path parameter could not be parsed as a document id."""

    def __init__(self, raw_id: str) -> None:
        self.raw_id = raw_id
        super().__init__(f"invalid identifier: {raw_id}")


class UpstreamError(AppError):
    """A downstream collaborator failed.  The message stays generic."""


class PersistenceError(UpstreamError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "internal server error"


class PaymentProviderError(UpstreamError):
    status_code = status.HTTP_502_BAD_GATEWAY
    message = "payment provider error"


def error_body(message: str, **extra) -> Dict:
    body = {"error": True, "message": message}
    body.update(extra)
    return body


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %r", request.method, request.url.path, exc.__cause__ or exc)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message), headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("invalid request", details=details),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error mapping to ``app``."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
