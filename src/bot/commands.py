"""Slash command handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from src.bot.messages import build_hello_message, build_roll_prompt
from src.bot.router import InteractionResult, error_result
from src.game.dice import die_for_command
from src.utils.constants import EMOJI_POOL

if TYPE_CHECKING:
    from src.bot.deps import Deps

logger = logging.getLogger("dicebot.commands")


def handle_command(name: str, deps: Deps) -> InteractionResult:
    """Dispatch a slash command by name."""
    if name == "test":
        return _cmd_test(deps)

    die = die_for_command(name)
    if die is not None:
        return InteractionResult(body=build_roll_prompt(die))

    logger.warning("unknown command: %s", name)
    return error_result("unknown command")


def _cmd_test(deps: Deps) -> InteractionResult:
    emoji = deps.rng.choice(EMOJI_POOL)
    return InteractionResult(body=build_hello_message(emoji))
