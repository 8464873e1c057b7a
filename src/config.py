"""Configuration for the dice bot."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from src.utils.constants import (
    DEFAULT_ASSETS_DIR,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_PORT,
    DISCORD_API_BASE,
)

REQUIRED = ("PUBLIC_KEY", "APP_ID", "DISCORD_TOKEN")


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, built once at startup and injected."""

    public_key: str
    application_id: str
    bot_token: str
    port: int = DEFAULT_PORT
    assets_dir: str = DEFAULT_ASSETS_DIR
    api_base: str = DISCORD_API_BASE
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: dict | None = None) -> Settings:
        """Build settings from the environment (and a .env file, if any)."""
        if environ is None:
            load_dotenv()
            environ = dict(os.environ)

        missing = [name for name in REQUIRED if not environ.get(name)]
        if missing:
            raise ValueError(f"Missing configuration: {', '.join(missing)}")

        return cls(
            public_key=environ["PUBLIC_KEY"],
            application_id=environ["APP_ID"],
            bot_token=environ["DISCORD_TOKEN"],
            port=int(environ.get("PORT") or DEFAULT_PORT),
            assets_dir=environ.get("ASSETS_DIR") or DEFAULT_ASSETS_DIR,
            api_base=(environ.get("DISCORD_API_BASE") or DISCORD_API_BASE).rstrip("/"),
            http_timeout=float(environ.get("HTTP_TIMEOUT") or DEFAULT_HTTP_TIMEOUT),
            log_level=(environ.get("LOG_LEVEL") or "INFO").upper(),
        )
