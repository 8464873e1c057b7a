"""Dependency container for bot handlers."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.db.repository import ActiveGameStore
    from src.utils.discord import DiscordClient
    from src.utils.placeholder import PlaceholderClient


@dataclass
class Deps:
    """Bundles all dependencies for handler functions."""

    discord: DiscordClient
    placeholder: PlaceholderClient
    rng: random.Random
    game_store: ActiveGameStore
    assets_dir: str = "assets"
