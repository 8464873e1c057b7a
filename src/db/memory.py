"""In-memory store implementations for the bot process and tests."""

from __future__ import annotations

import copy


class InMemoryActiveGameStore:
    """Active games keyed by channel id, lost on restart."""

    def __init__(self) -> None:
        self._games: dict[str, dict] = {}

    def get_game(self, channel_id: str) -> dict | None:
        game = self._games.get(channel_id)
        return copy.deepcopy(game) if game else None

    def save_game(self, channel_id: str, game: dict) -> None:
        self._games[channel_id] = copy.deepcopy(game)

    def delete_game(self, channel_id: str) -> None:
        self._games.pop(channel_id, None)
