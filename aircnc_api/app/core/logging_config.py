"""
Logging configuration for the application.

``setup_logging`` installs the process logging setup through
``logging.config.dictConfig``: a console handler, an optional file
handler and quieter levels for the MongoDB and HTTP client libraries.
``create_app`` calls it once; if the root logger already has handlers
(uvicorn, pytest) the existing setup is left in place.
"""

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Driver loggers that are chatty at INFO level.
LIBRARY_LOGGERS = ("pymongo", "httpx", "httpcore")


def build_logging_config(level: str = "INFO", logfile: Optional[str] = None) -> Dict[str, Any]:
    """Return the ``dictConfig`` mapping for ``level`` and ``logfile``.

    Unknown level names fall back to ``INFO``.  Library loggers are held
    at ``WARNING`` unless ``level`` is ``DEBUG``.
    """
    level_name = level.upper() if isinstance(logging.getLevelName(level.upper()), int) else "INFO"
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {"class": "logging.StreamHandler", "formatter": "standard"},
    }
    if logfile:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "standard",
            "filename": str(Path(logfile).resolve()),
            "encoding": "utf-8",
        }
    library_level = "DEBUG" if level_name == "DEBUG" else "WARNING"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT}},
        "handlers": handlers,
        "root": {"level": level_name, "handlers": list(handlers)},
        "loggers": {name: {"level": library_level} for name in LIBRARY_LOGGERS},
    }


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging unless the root logger is already configured."""
    if logging.getLogger().handlers:
        return
    logging.config.dictConfig(build_logging_config(level, logfile))
