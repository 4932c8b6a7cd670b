"""Unit and theme preferences."""

from weatherdash.models.common import Theme, Unit
from weatherdash.storage.kv_store import KeyValueStore

UNIT_KEY = "unit"
THEME_KEY = "theme"


class PreferencesStore:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def get_unit(self) -> Unit:
        try:
            return Unit(self.store.get(UNIT_KEY))
        except ValueError:
            return Unit.CELSIUS

    def set_unit(self, unit: Unit) -> None:
        self.store.set(UNIT_KEY, unit.value)

    def get_theme(self) -> Theme:
        try:
            return Theme(self.store.get(THEME_KEY))
        except ValueError:
            return Theme.LIGHT

    def set_theme(self, theme: Theme) -> None:
        self.store.set(THEME_KEY, theme.value)
