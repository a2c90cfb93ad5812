"""
Main entrypoint for the AirCNC API.

This module assembles the FastAPI application: logging, CORS, the
error mapping, the v1 routes and the lifecycle of the shared clients.
``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``, so it can be served
with::

    uvicorn aircnc_api.app.main:app --port 5000
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import close_db, connect_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.notification_service import NotificationService
from .services.payment_service import PaymentService


LIVENESS_MESSAGE = "AirCNC Server is running.."


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application.  Database, payment and email clients
        are attached to ``app.state`` by the startup handler.
    """
    # Logging first, so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def liveness() -> str:
        return LIVENESS_MESSAGE

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        # One client per process, shared read‑only by all request tasks.
        app.state.mongo_client, app.state.db = await connect_db()
        app.state.payments = PaymentService()
        app.state.notifier = NotificationService()
        logger.info("%s is running on port %s", settings.project_name, settings.port)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        await app.state.payments.aclose()
        await close_db(app.state.mongo_client)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
