"""Interaction router: dispatches interactions to handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from src.bot.messages import build_error, build_pong
from src.utils.constants import (
    INTERACTION_APPLICATION_COMMAND,
    INTERACTION_MESSAGE_COMPONENT,
    INTERACTION_PING,
)

if TYPE_CHECKING:
    from src.bot.deps import Deps

logger = logging.getLogger("dicebot.router")


@dataclass
class InteractionResult:
    """Synchronous reply, plus work to run once the reply is sent."""

    body: dict
    status_code: int = 200
    followup: Callable[[], object] | None = None


def error_result(message: str) -> InteractionResult:
    return InteractionResult(body=build_error(message), status_code=400)


def route_interaction(interaction: dict, deps: Deps) -> InteractionResult:
    """Route a verified interaction to the appropriate handler."""
    from src.bot.callbacks import handle_component
    from src.bot.commands import handle_command

    kind = interaction.get("type")
    data = interaction.get("data")
    if not isinstance(data, dict):
        data = {}

    if kind == INTERACTION_PING:
        return InteractionResult(body=build_pong())

    if kind == INTERACTION_APPLICATION_COMMAND:
        return handle_command(data.get("name", ""), deps)

    if kind == INTERACTION_MESSAGE_COMPONENT:
        return handle_component(
            data.get("custom_id", ""), interaction.get("token", ""), deps
        )

    logger.warning("unknown interaction type: %s", kind)
    return error_result("unknown interaction type")
