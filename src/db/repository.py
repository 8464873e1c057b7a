"""Repository protocol interfaces for per-channel session state."""

from __future__ import annotations

from typing import Protocol


class ActiveGameStore(Protocol):
    def get_game(self, channel_id: str) -> dict | None:
        ...

    def save_game(self, channel_id: str, game: dict) -> None:
        ...

    def delete_game(self, channel_id: str) -> None:
        ...
