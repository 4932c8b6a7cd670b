"""Tests for the persisted favorites list."""

import json
import typing
from pathlib import Path

from weatherdash.storage.favorites import FAVORITES_KEY, FavoritesStore
from weatherdash.storage.kv_store import InMemoryKeyValueStore, SqliteKeyValueStore


class TestFavoritesStore:
    def test_empty_by_default(self, memory_store: InMemoryKeyValueStore):
        assert FavoritesStore(memory_store).list() == []

    def test_duplicate_add_is_noop(self, memory_store: InMemoryKeyValueStore):
        favorites = FavoritesStore(memory_store)
        favorites.add("Paris")
        favorites.add("Paris")
        assert favorites.list() == ["Paris"]

    def test_remove_on_empty_is_noop(self, memory_store: InMemoryKeyValueStore):
        favorites = FavoritesStore(memory_store)
        favorites.remove("Tokyo")
        assert favorites.list() == []
        assert memory_store.get(FAVORITES_KEY) is None

    def test_remove_preserves_order(self, memory_store: InMemoryKeyValueStore):
        favorites = FavoritesStore(memory_store)
        favorites.add("A")
        favorites.add("B")
        favorites.add("C")
        favorites.remove("A")
        assert favorites.list() == ["B", "C"]

    def test_add_then_remove(self, memory_store: InMemoryKeyValueStore):
        favorites = FavoritesStore(memory_store)
        favorites.add("A")
        favorites.add("B")
        favorites.remove("A")
        assert favorites.list() == ["B"]

    def test_case_sensitive(self, memory_store: InMemoryKeyValueStore):
        favorites = FavoritesStore(memory_store)
        favorites.add("Paris")
        favorites.add("paris")
        favorites.remove("PARIS")
        assert favorites.list() == ["Paris", "paris"]
        assert favorites.contains("Paris")
        assert not favorites.contains("PARIS")

    def test_list_is_idempotent(self, memory_store: InMemoryKeyValueStore):
        favorites = FavoritesStore(memory_store)
        favorites.add("Oslo")
        assert favorites.list() == favorites.list()

    def test_persists_whole_list_as_json(self, memory_store: InMemoryKeyValueStore):
        favorites = FavoritesStore(memory_store)
        favorites.add("Oslo")
        favorites.add("Rome")
        assert json.loads(memory_store.get(FAVORITES_KEY)) == ["Oslo", "Rome"]

    def test_malformed_value_recovers_empty(self):
        store = InMemoryKeyValueStore({FAVORITES_KEY: "not json["})
        favorites = FavoritesStore(store)
        assert favorites.list() == []
        favorites.add("Lima")
        assert favorites.list() == ["Lima"]

    def test_non_list_value_recovers_empty(self):
        assert FavoritesStore(InMemoryKeyValueStore({FAVORITES_KEY: '{"a": 1}'})).list() == []
        assert FavoritesStore(InMemoryKeyValueStore({FAVORITES_KEY: "[1, 2]"})).list() == []

    def test_sqlite_backed(self, tmp_path: Path):
        db_path = tmp_path / "fav.db"
        store = SqliteKeyValueStore.open(db_path)
        FavoritesStore(store).add("Berlin")
        store.close()

        reopened = SqliteKeyValueStore.open(db_path)
        assert FavoritesStore(reopened).list() == ["Berlin"]
        reopened.close()

    def test_method_annotations_resolve_to_builtin_list(self):
        # the ``list`` method shadows the builtin inside the class body
        hints = typing.get_type_hints(FavoritesStore._save)
        assert hints["favorites"] == list[str]
