"""Roll follow-ups, sent after the deferred acknowledgment."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from src.bot.messages import build_followup_payload
from src.game.dice import DieSpec, roll
from src.game.images import resolve_image

if TYPE_CHECKING:
    from src.bot.deps import Deps

logger = logging.getLogger("dicebot.followups")


def send_roll_followup(die: DieSpec, interaction_token: str, deps: Deps) -> bool:
    """Roll the die and post the result image to the interaction webhook.

    Runs once, after the deferred response has gone out. Failures are
    logged and swallowed: the acknowledgment cannot be revised, and there
    is no retry. Returns whether the follow-up was delivered.
    """
    try:
        value = roll(die, deps.rng)
        logger.info("Rolled %s: %d", die.label, value)

        image = resolve_image(die, value, deps.assets_dir, deps.placeholder)
        payload = build_followup_payload(die, value, image.file_name)
        deps.discord.send_followup(
            interaction_token, payload, image.file_name, image.data
        )
    except Exception:
        logger.exception("Error sending %s roll followup", die.label)
        return False

    logger.info("Sent %s followup (%s)", die.label, image.file_name)
    return True
