"""HTTP entry point for the dice bot.

This is a thin adapter that verifies Discord interaction requests and
routes them to the appropriate command or component handler. All bot
logic lives in src/bot/ and src/game/.
"""

from __future__ import annotations

import json
import logging

from fastapi import BackgroundTasks, FastAPI, Request
from fastapi.responses import JSONResponse

from src.config import Settings
from src.utils.constants import SIGNATURE_HEADER, TIMESTAMP_HEADER
from src.utils.crypto import verify_signature

logger = logging.getLogger("dicebot.handler")


def _init_deps(settings: Settings, overrides: dict | None = None):
    """Build handler dependencies from settings."""
    from src.bot.deps import Deps

    if overrides:
        return Deps(**overrides)

    from src.db.memory import InMemoryActiveGameStore
    from src.utils.crypto import create_rng
    from src.utils.discord import DiscordClient
    from src.utils.placeholder import PlaceholderClient

    return Deps(
        discord=DiscordClient(
            settings.application_id,
            settings.bot_token,
            api_base=settings.api_base,
            timeout=settings.http_timeout,
        ),
        placeholder=PlaceholderClient(timeout=settings.http_timeout),
        rng=create_rng(),
        game_store=InMemoryActiveGameStore(),
        assets_dir=settings.assets_dir,
    )


def create_app(settings: Settings, overrides: dict | None = None) -> FastAPI:
    """Build the FastAPI app serving ``POST /interactions``."""
    from src.bot.router import route_interaction

    deps = _init_deps(settings, overrides)
    app = FastAPI()
    app.state.deps = deps

    @app.get("/health")
    def health() -> dict:
        return {"ok": True}

    @app.post("/interactions")
    async def interactions(request: Request, background: BackgroundTasks):
        raw_body = await request.body()
        if not verify_signature(
            settings.public_key,
            request.headers.get(SIGNATURE_HEADER),
            request.headers.get(TIMESTAMP_HEADER),
            raw_body,
        ):
            logger.warning("Invalid request signature")
            return JSONResponse(
                {"error": "invalid request signature"}, status_code=401
            )

        try:
            interaction = json.loads(raw_body)
        except ValueError:
            return JSONResponse({"error": "invalid JSON"}, status_code=400)
        if not isinstance(interaction, dict):
            return JSONResponse({"error": "invalid JSON"}, status_code=400)

        logger.info(
            json.dumps(
                {
                    "event": "interaction_received",
                    "id": interaction.get("id"),
                    "type": interaction.get("type"),
                }
            )
        )

        result = route_interaction(interaction, deps)
        # Background tasks run only after the response has been sent.
        if result.followup is not None:
            background.add_task(result.followup)
        return JSONResponse(result.body, status_code=result.status_code)

    return app


def main() -> None:
    import uvicorn

    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.info("Listening on port %d", settings.port)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
