"""Message component (button press) handlers."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from src.bot.followups import send_roll_followup
from src.bot.messages import build_deferred
from src.bot.router import InteractionResult, error_result
from src.game.dice import die_for_button

if TYPE_CHECKING:
    from src.bot.deps import Deps

logger = logging.getLogger("dicebot.callbacks")


def handle_component(custom_id: str, token: str, deps: Deps) -> InteractionResult:
    """Acknowledge a roll button press and schedule its follow-up.

    Nothing is rolled or fetched here; all I/O happens in the follow-up,
    after the deferred response has been sent.
    """
    die = die_for_button(custom_id)
    if die is None:
        logger.warning("unknown component: %s", custom_id)
        return error_result("unknown component")

    logger.info("Deferring %s roll", die.label)
    return InteractionResult(
        body=build_deferred(),
        followup=functools.partial(send_roll_followup, die, token, deps),
    )
