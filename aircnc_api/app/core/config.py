"""
Configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first, so local development only needs that file.  Defaults
are provided for everything except credentials, which must be
supplied by the deployment.
"""

import os
from dataclasses import dataclass, field
from urllib.parse import quote_plus

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "AirCNC API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the resource routes are mounted.  Existing
    # clients call the routes at the root, so the default is empty.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Token signing.  Tokens issued by ``POST /jwt`` expire after one hour.
    secret_key: str = os.getenv("ACCESS_TOKEN_SECRET", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
    algorithm: str = "HS256"

    # MongoDB.  ``DATABASE_URL`` wins when set; otherwise an Atlas SRV
    # URI is composed from the user, password and cluster host.
    db_user: str = os.getenv("DB_USER", "")
    db_pass: str = os.getenv("DB_PASS", "")
    db_cluster_host: str = os.getenv("DB_CLUSTER_HOST", "cluster0.59h5qtx.mongodb.net")
    database_url: str = os.getenv("DATABASE_URL", "")
    database_name: str = os.getenv("DATABASE_NAME", "aircncDB")

    # Stripe.  Amounts are sent in minor units of ``payment_currency``.
    payment_secret_key: str = os.getenv("PAYMENT_SECRET_KEY", "")
    payment_api_base: str = os.getenv("PAYMENT_API_BASE", "https://api.stripe.com")
    payment_currency: str = os.getenv("PAYMENT_CURRENCY", "usd")

    # Outgoing mail account (a Gmail account in the original deployment).
    email_user: str = os.getenv("EMAIL", "")
    email_password: str = os.getenv("PASS", "")
    smtp_host: str = os.getenv("SMTP_HOST", "smtp.gmail.com")
    smtp_port: int = int(os.getenv("SMTP_PORT", "465"))
    email_verify_transport: bool = _env_flag("EMAIL_VERIFY_TRANSPORT", "true")

    # When true, booking confirmation emails are sent after the response
    # has been produced instead of before it.
    notify_in_background: bool = _env_flag("NOTIFY_IN_BACKGROUND", "true")

    # Room mutation routes historically accept any caller.  Setting
    # ENFORCE_ROOM_OWNERSHIP requires a token of the room's host instead.
    enforce_room_ownership: bool = _env_flag("ENFORCE_ROOM_OWNERSHIP")

    cors_origins: list[str] = field(
        default_factory=lambda: [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    )

    @property
    def mongo_uri(self) -> str:
        """Connection string used by the MongoDB client."""
        if self.database_url:
            return self.database_url
        return (
            f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}"
            f"@{self.db_cluster_host}/?retryWrites=true&w=majority"
        )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# therefore be set before this module is first imported.
settings = Settings()
