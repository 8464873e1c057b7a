"""Shared test fixtures for the dice bot."""

from __future__ import annotations

import pytest
from nacl.signing import SigningKey

from src.bot.deps import Deps
from src.config import Settings
from src.db.memory import InMemoryActiveGameStore
from src.utils.crypto import create_rng


class MockDiscordClient:
    """Records all Discord API calls for test assertions."""

    def __init__(self, fail: Exception | None = None) -> None:
        self.calls: list[tuple[str, dict]] = []
        self.fail = fail

    def send_followup(
        self,
        interaction_token: str,
        payload: dict,
        file_name: str,
        file_bytes: bytes,
        content_type: str = "image/jpeg",
    ) -> dict:
        self.calls.append((
            "send_followup",
            {
                "interaction_token": interaction_token,
                "payload": payload,
                "file_name": file_name,
                "file_bytes": file_bytes,
            },
        ))
        if self.fail is not None:
            raise self.fail
        return {"id": str(len(self.calls))}

    def get_calls(self, method: str) -> list[dict]:
        """Get all calls for a specific method."""
        return [kwargs for m, kwargs in self.calls if m == method]

    def last_call(self, method: str) -> dict | None:
        """Get the last call for a specific method."""
        calls = self.get_calls(method)
        return calls[-1] if calls else None


class MockPlaceholderClient:
    """Returns fixed bytes and records requested labels and values."""

    def __init__(self, data: bytes = b"PLACEHOLDER", fail: Exception | None = None) -> None:
        self.data = data
        self.requests: list[tuple[str, int]] = []
        self.fail = fail

    def fetch(self, label: str, value: int) -> bytes:
        self.requests.append((label, value))
        if self.fail is not None:
            raise self.fail
        return self.data


def make_deps(
    assets_dir: str = "does-not-exist",
    seed: int = 42,
    discord: MockDiscordClient | None = None,
    placeholder: MockPlaceholderClient | None = None,
) -> Deps:
    return Deps(
        discord=discord or MockDiscordClient(),
        placeholder=placeholder or MockPlaceholderClient(),
        rng=create_rng(seed),
        game_store=InMemoryActiveGameStore(),
        assets_dir=assets_dir,
    )


def seed_for(faces: int, value: int) -> int:
    """Find a seed whose first roll on a die with ``faces`` is ``value``."""
    for seed in range(10_000):
        if create_rng(seed).randint(1, faces) == value:
            return seed
    raise AssertionError(f"no seed rolls {value} on d{faces}")


@pytest.fixture
def mock_discord():
    return MockDiscordClient()


@pytest.fixture
def mock_placeholder():
    return MockPlaceholderClient()


@pytest.fixture
def signing_key():
    return SigningKey.generate()


@pytest.fixture
def settings(signing_key, tmp_path):
    return Settings(
        public_key=signing_key.verify_key.encode().hex(),
        application_id="app123",
        bot_token="bot-token",
        assets_dir=str(tmp_path),
    )


@pytest.fixture
def assets(tmp_path):
    """Assets directory laid out like ./assets (d20 at the root)."""
    (tmp_path / "d6").mkdir()
    (tmp_path / "d4").mkdir()
    return tmp_path
