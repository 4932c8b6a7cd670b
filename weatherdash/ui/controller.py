"""View controller: turns user events into client calls and view updates.

Handlers run one at a time. Two fetches triggered back to back both run to
completion and the last one to finish owns the displayed state.
"""

import logging
from datetime import tzinfo

from weatherdash.config.schema import OPENWEATHER_ICON_URL
from weatherdash.display.background import select_background
from weatherdash.display.units import reconvert_displayed
from weatherdash.errors import (
    CityNotFound,
    GeolocationDenied,
    GeolocationError,
    WeatherError,
)
from weatherdash.ingest.owm_client import OpenWeatherClient
from weatherdash.models.common import Coordinates
from weatherdash.models.state import AppState
from weatherdash.models.weather import DailyForecast, WeatherSnapshot
from weatherdash.storage.favorites import FavoritesStore
from weatherdash.storage.preferences import PreferencesStore
from weatherdash.ui.view import (
    DEFAULT_TITLE,
    View,
    build_current_view,
    build_forecast_view,
)

logger = logging.getLogger(__name__)

CITY_NOT_FOUND_MESSAGE = "City not found. Please try another city."
FETCH_FAILED_MESSAGE = "Failed to fetch weather data. Please try again later."
GEOLOCATION_DENIED_MESSAGE = (
    "Geolocation permission denied. Please search for a city manually."
)
GEOLOCATION_UNSUPPORTED_MESSAGE = (
    "Geolocation is not supported by your browser. Please search for a city manually."
)


class ViewController:
    def __init__(
        self,
        client: OpenWeatherClient,
        favorites: FavoritesStore,
        preferences: PreferencesStore,
        view: View,
        state: AppState | None = None,
        tz: tzinfo | None = None,
        icon_base_url: str = OPENWEATHER_ICON_URL,
    ):
        self.client = client
        self.favorites = favorites
        self.preferences = preferences
        self.view = view
        self.state = state if state is not None else AppState()
        self.tz = tz
        self.icon_base_url = icon_base_url

    # --- Startup ---

    def start(self) -> None:
        """Apply saved preferences, then show the first favorite or ask for a location."""
        self.state.theme = self.preferences.get_theme()
        self.view.set_theme(self.state.theme)
        self.state.unit = self.preferences.get_unit()
        self.view.set_unit(self.state.unit)

        self.state.favorites = self.favorites.list()
        self.view.render_favorites(self.state.favorites)

        if self.state.favorites:
            self.load_city(self.state.favorites[0])
        else:
            self.request_location()

    # --- Fetch paths ---

    def search(self, text: str) -> bool:
        city = text.strip()
        if not city:
            return False
        return self.load_city(city)

    def select_favorite(self, city: str) -> bool:
        return self.load_city(city)

    def load_city(self, city: str) -> bool:
        self.view.clear_error()
        try:
            snapshot = self.client.fetch_current(city=city)
            forecast = self.client.fetch_forecast(
                snapshot.coordinates.lat, snapshot.coordinates.lon
            )
        except WeatherError as e:
            self._show_fetch_error(e)
            return False
        self._show(snapshot, forecast)
        return True

    def request_location(self) -> None:
        self.view.request_geolocation()

    def on_location(self, coords: Coordinates) -> bool:
        self.view.end_geolocation()
        self.view.clear_error()
        try:
            snapshot = self.client.fetch_current(lat=coords.lat, lon=coords.lon)
            forecast = self.client.fetch_forecast(coords.lat, coords.lon)
        except WeatherError as e:
            self._show_fetch_error(e)
            return False
        self._show(snapshot, forecast)
        return True

    def on_location_failed(self, error: GeolocationError) -> None:
        self.view.end_geolocation()
        logger.warning("Geolocation unavailable: %s", error)
        if isinstance(error, GeolocationDenied):
            self.view.show_error(GEOLOCATION_DENIED_MESSAGE)
        else:
            self.view.show_error(GEOLOCATION_UNSUPPORTED_MESSAGE)

    # --- Favorites ---

    def toggle_favorite(self) -> None:
        city = self.state.current_city
        if not city:
            return
        if city in self.state.favorites:
            self.favorites.remove(city)
        else:
            self.favorites.add(city)
        self._refresh_favorites()
        self._sync_favorite_button(city)

    def remove_favorite(self, city: str) -> None:
        self.favorites.remove(city)
        self._refresh_favorites()
        if self.state.current_city == city:
            self._sync_favorite_button(city)

    # --- Preferences ---

    def toggle_unit(self) -> None:
        """Flip the unit and convert what is on screen, rounding included."""
        unit = self.state.unit.toggled()
        self.state.unit = unit
        self.preferences.set_unit(unit)
        self.view.set_unit(unit)
        self.view.rewrite_temperatures(lambda text: reconvert_displayed(text, unit))

    def toggle_theme(self) -> None:
        self.state.theme = self.state.theme.toggled()
        self.preferences.set_theme(self.state.theme)
        self.view.set_theme(self.state.theme)

    # --- Internals ---

    def _show(self, snapshot: WeatherSnapshot, forecast: DailyForecast) -> None:
        self.state.current_city = snapshot.city_name
        self.view.set_title(f"{DEFAULT_TITLE} | {snapshot.city_name}")
        self.view.render_weather(
            build_current_view(snapshot, self.state.unit, self.tz, self.icon_base_url),
            build_forecast_view(forecast, self.state.unit, self.tz, self.icon_base_url),
        )
        self.view.set_background(
            select_background(
                snapshot.condition_main,
                snapshot.observed_at,
                snapshot.sunrise,
                snapshot.sunset,
            )
        )
        self._sync_favorite_button(snapshot.city_name)
        logger.info(
            "Showing %s: %s, %d forecast days",
            snapshot.city_name, snapshot.condition_main, len(forecast),
        )

    def _show_fetch_error(self, error: WeatherError) -> None:
        if isinstance(error, CityNotFound):
            logger.warning("City not found: %s", error.city)
            self.view.show_error(CITY_NOT_FOUND_MESSAGE)
        else:
            logger.exception("Error fetching weather data")
            self.view.show_error(FETCH_FAILED_MESSAGE)

    def _refresh_favorites(self) -> None:
        self.state.favorites = self.favorites.list()
        self.view.render_favorites(self.state.favorites)

    def _sync_favorite_button(self, city: str) -> None:
        self.view.set_favorite_button(True, city in self.state.favorites)
