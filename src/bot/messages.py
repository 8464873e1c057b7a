"""Interaction response and follow-up payload builders."""

from __future__ import annotations

from src.game.dice import DieSpec
from src.utils.constants import (
    BUTTON_STYLE_PRIMARY,
    COMPONENT_ACTION_ROW,
    COMPONENT_BUTTON,
    COMPONENT_TEXT_DISPLAY,
    DICE_EMOJI,
    EMBED_COLOR,
    FLAG_IS_COMPONENTS_V2,
    HELLO_PREFIX,
    RESPONSE_CHANNEL_MESSAGE,
    RESPONSE_DEFERRED_CHANNEL_MESSAGE,
    RESPONSE_PONG,
    ROLL_BUTTON_LABEL,
)

# --- Text formatters ---


def format_hello(emoji: str) -> str:
    return f"{HELLO_PREFIX}{emoji}"


def format_result(value: int) -> str:
    return f"{DICE_EMOJI} Resultado: **{value}**"


def format_embed_title(die: DieSpec, value: int) -> str:
    return f"{die.label}: {value}"


# --- Components ---


def build_text_display(content: str) -> dict:
    return {"type": COMPONENT_TEXT_DISPLAY, "content": content}


def build_roll_button(die: DieSpec) -> dict:
    return {
        "type": COMPONENT_BUTTON,
        "custom_id": die.button_id,
        "label": ROLL_BUTTON_LABEL,
        "emoji": {"name": DICE_EMOJI},
        "style": BUTTON_STYLE_PRIMARY,
    }


# --- Responses ---


def build_pong() -> dict:
    return {"type": RESPONSE_PONG}


def build_deferred() -> dict:
    return {"type": RESPONSE_DEFERRED_CHANNEL_MESSAGE}


def build_message(components: list[dict]) -> dict:
    """Respond-now message using the components-v2 layout."""
    return {
        "type": RESPONSE_CHANNEL_MESSAGE,
        "data": {
            "flags": FLAG_IS_COMPONENTS_V2,
            "components": components,
        },
    }


def build_hello_message(emoji: str) -> dict:
    return build_message([build_text_display(format_hello(emoji))])


def build_roll_prompt(die: DieSpec) -> dict:
    return build_message(
        [
            build_text_display(die.prompt),
            {
                "type": COMPONENT_ACTION_ROW,
                "components": [build_roll_button(die)],
            },
        ]
    )


def build_error(message: str) -> dict:
    return {"error": message}


# --- Follow-ups ---


def build_followup_payload(die: DieSpec, value: int, file_name: str) -> dict:
    """JSON part of the follow-up; the embed points at the attached file."""
    return {
        "content": format_result(value),
        "embeds": [
            {
                "title": format_embed_title(die, value),
                "image": {"url": f"attachment://{file_name}"},
                "color": EMBED_COLOR,
            }
        ],
    }
