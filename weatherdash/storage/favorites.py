"""Persisted, insertion-ordered set of favorite city names."""

import builtins
import json
import logging

from weatherdash.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favorites"


class FavoritesStore:
    """Favorites kept as a JSON array under one key.

    Every mutation rewrites the whole list. Matching is exact and case
    sensitive.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    def list(self) -> list[str]:
        raw = self.store.get(FAVORITES_KEY)
        if not raw:
            return []
        try:
            favorites = json.loads(raw)
        except ValueError:
            logger.debug("Ignoring malformed favorites value: %r", raw)
            return []
        if not isinstance(favorites, list) or not all(
            isinstance(c, str) for c in favorites
        ):
            logger.debug("Ignoring non-list favorites value: %r", raw)
            return []
        return favorites

    def contains(self, city: str) -> bool:
        return city in self.list()

    def add(self, city: str) -> None:
        favorites = self.list()
        if city in favorites:
            return
        favorites.append(city)
        self._save(favorites)

    def remove(self, city: str) -> None:
        favorites = self.list()
        if city not in favorites:
            return
        favorites.remove(city)
        self._save(favorites)

    def _save(self, favorites: builtins.list[str]) -> None:
        self.store.set(FAVORITES_KEY, json.dumps(favorites))
