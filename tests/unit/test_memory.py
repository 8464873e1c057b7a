"""Tests for the in-memory active game store."""

from src.db.memory import InMemoryActiveGameStore


class TestInMemoryActiveGameStore:
    def test_empty(self):
        assert InMemoryActiveGameStore().get_game("c1") is None

    def test_save_and_get(self):
        store = InMemoryActiveGameStore()
        store.save_game("c1", {"die": "d6", "rolls": [3]})
        assert store.get_game("c1") == {"die": "d6", "rolls": [3]}
        assert store.get_game("c2") is None

    def test_returns_copies(self):
        store = InMemoryActiveGameStore()
        game = {"rolls": [1]}
        store.save_game("c1", game)
        game["rolls"].append(2)
        fetched = store.get_game("c1")
        fetched["rolls"].append(5)
        assert store.get_game("c1") == {"rolls": [1]}

    def test_delete(self):
        store = InMemoryActiveGameStore()
        store.save_game("c1", {"x": 1})
        store.delete_game("c1")
        store.delete_game("missing")
        assert store.get_game("c1") is None
