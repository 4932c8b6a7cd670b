"""Tests for the FastAPI dashboard endpoints."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from weatherdash.config.schema import DashboardConfig
from weatherdash.dashboard import create_app
from weatherdash.errors import CityNotFound
from weatherdash.ingest.owm_client import OpenWeatherClient
from weatherdash.storage.favorites import FavoritesStore
from weatherdash.storage.kv_store import SqliteKeyValueStore
from weatherdash.ui.controller import (
    CITY_NOT_FOUND_MESSAGE,
    GEOLOCATION_DENIED_MESSAGE,
    GEOLOCATION_UNSUPPORTED_MESSAGE,
)


@pytest.fixture
def owm(london_snapshot, london_daily) -> MagicMock:
    mock = MagicMock(spec=OpenWeatherClient)
    mock.api_key = "test-key"
    mock.fetch_current.return_value = london_snapshot
    mock.fetch_forecast.return_value = london_daily
    return mock


@pytest.fixture
def api(default_config: DashboardConfig, owm: MagicMock) -> TestClient:
    return TestClient(create_app(default_config, client=owm))


class TestStartup:
    def test_requests_location_without_favorites(self, api: TestClient, owm: MagicMock):
        state = api.get("/api/state").json()
        assert state["geolocation_pending"] is True
        assert state["current"] is None
        owm.fetch_current.assert_not_called()

    def test_loads_first_favorite(self, default_config: DashboardConfig, owm: MagicMock):
        store = SqliteKeyValueStore.open(default_config.storage.db_path)
        FavoritesStore(store).add("London")
        store.close()

        api = TestClient(create_app(default_config, client=owm))
        state = api.get("/api/state").json()
        assert state["current"]["city_name"] == "London"
        assert state["favorites"] == ["London"]
        assert state["is_favorite"] is True


class TestWeatherActions:
    def test_search(self, api: TestClient):
        resp = api.post("/api/search", json={"city": "London"})
        assert resp.status_code == 200
        state = resp.json()
        assert state["title"] == "Weather App | London"
        assert state["current"]["temperature"] == "12°C"
        assert state["background"] == "clear-day"
        assert [d["day"] for d in state["forecast"]] == ["Mon", "Tue", "Wed"]

    def test_search_not_found(self, api: TestClient, owm: MagicMock):
        owm.fetch_current.side_effect = CityNotFound("Atlantis")
        state = api.post("/api/search", json={"city": "Atlantis"}).json()
        assert state["error"] == CITY_NOT_FOUND_MESSAGE

    def test_search_requires_city(self, api: TestClient):
        assert api.post("/api/search", json={}).status_code == 422

    def test_location(self, api: TestClient, owm: MagicMock):
        state = api.post("/api/location", json={"lat": 48.85, "lon": 2.35}).json()
        owm.fetch_current.assert_called_once_with(lat=48.85, lon=2.35)
        assert state["geolocation_pending"] is False
        assert state["current"]["city_name"] == "London"

    def test_location_out_of_range(self, api: TestClient):
        assert api.post("/api/location", json={"lat": 123, "lon": 0}).status_code == 422

    def test_location_request(self, api: TestClient):
        api.post("/api/location/error", json={"reason": "denied"})
        state = api.post("/api/location/request").json()
        assert state["geolocation_pending"] is True

    @pytest.mark.parametrize(
        "reason,message",
        [
            ("denied", GEOLOCATION_DENIED_MESSAGE),
            ("unsupported", GEOLOCATION_UNSUPPORTED_MESSAGE),
        ],
    )
    def test_location_error(self, api: TestClient, reason: str, message: str):
        state = api.post("/api/location/error", json={"reason": reason}).json()
        assert state["error"] == message
        assert state["geolocation_pending"] is False

    def test_location_error_unknown_reason(self, api: TestClient):
        resp = api.post("/api/location/error", json={"reason": "timeout"})
        assert resp.status_code == 422


class TestFavoritesEndpoints:
    def test_toggle_and_remove(self, api: TestClient):
        api.post("/api/search", json={"city": "London"})

        state = api.post("/api/favorites/toggle").json()
        assert state["favorites"] == ["London"]
        assert state["is_favorite"] is True

        state = api.delete("/api/favorites/London").json()
        assert state["favorites"] == []
        assert state["is_favorite"] is False

    def test_select(self, api: TestClient, owm: MagicMock):
        api.post("/api/favorites/New York/select")
        owm.fetch_current.assert_called_once_with(city="New York")

    def test_select_city_with_slash(self, api: TestClient, owm: MagicMock):
        resp = api.post("/api/favorites/Kyiv%2FKiev/select")
        assert resp.status_code == 200
        owm.fetch_current.assert_called_once_with(city="Kyiv/Kiev")

    def test_remove_city_with_slash(self, default_config: DashboardConfig, owm: MagicMock):
        store = SqliteKeyValueStore.open(default_config.storage.db_path)
        FavoritesStore(store).add("Kyiv/Kiev")
        FavoritesStore(store).add("Oslo")
        store.close()

        api = TestClient(create_app(default_config, client=owm))
        resp = api.delete("/api/favorites/Kyiv%2FKiev")
        assert resp.status_code == 200
        assert resp.json()["favorites"] == ["Oslo"]


class TestPreferenceEndpoints:
    def test_unit_toggle(self, api: TestClient):
        api.post("/api/search", json={"city": "London"})
        state = api.post("/api/unit/toggle").json()
        assert state["unit"] == "fahrenheit"
        assert state["current"]["temperature"] == "54°F"

    def test_theme_toggle(self, api: TestClient):
        state = api.post("/api/theme/toggle").json()
        assert state["theme"] == "dark"


class TestHealthAndPage:
    def test_health(self, api: TestClient):
        data = api.get("/api/health").json()
        assert data["db_ok"] is True
        assert data["api_key_configured"] is True
        assert data["unit"] == "celsius"
        assert data["favorites_count"] == 0

    def test_serves_dashboard(self, api: TestClient):
        resp = api.get("/")
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert "Weather App" in resp.text
