"""Die definitions and rolling."""

from __future__ import annotations

import random
from dataclasses import dataclass

from src.utils.constants import D4_BUTTON_ID, D6_BUTTON_ID, D20_BUTTON_ID


@dataclass(frozen=True)
class DieSpec:
    """One simulated die: face count, asset location, button and labels."""

    command: str
    faces: int
    asset_dir: str
    button_id: str
    label: str
    prompt: str

    def __post_init__(self) -> None:
        if self.faces < 1:
            raise ValueError(f"{self.label}: a die needs at least one face")

    def asset_name(self, value: int) -> str:
        return f"{value}.jpg"


# The d20 images live at the root of the assets directory.
D20 = DieSpec(
    command="d20",
    faces=20,
    asset_dir="",
    button_id=D20_BUTTON_ID,
    label="D20",
    prompt="Lanza un dado maldito de 20 caras.",
)
D6 = DieSpec(
    command="d6",
    faces=6,
    asset_dir="d6",
    button_id=D6_BUTTON_ID,
    label="D6",
    prompt="Lanza un dado de 6 caras.",
)
D4 = DieSpec(
    command="d4",
    faces=4,
    asset_dir="d4",
    button_id=D4_BUTTON_ID,
    label="D4",
    prompt="Lanza un dado de 4 caras.",
)

DICE = (D20, D6, D4)

_BY_COMMAND = {die.command: die for die in DICE}
_BY_BUTTON = {die.button_id: die for die in DICE}


def die_for_command(name: str) -> DieSpec | None:
    return _BY_COMMAND.get(name)


def die_for_button(custom_id: str) -> DieSpec | None:
    return _BY_BUTTON.get(custom_id)


def roll(die: DieSpec, rng: random.Random) -> int:
    """Roll uniformly in [1, die.faces]."""
    return rng.randint(1, die.faces)
