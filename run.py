"""Serve the AirCNC API.

Host and port come from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``5000``); other configuration is
described in ``aircnc_api/app/core/config.py`` and may be placed in a
``.env`` file next to this script.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from aircnc_api.app.core.config import settings


async def main() -> None:
    config = Config(
        app="aircnc_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    await Server(config).serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
