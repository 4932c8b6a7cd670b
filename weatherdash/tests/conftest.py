"""Shared test fixtures."""

import json
from datetime import UTC
from pathlib import Path

import pytest
import yaml

from weatherdash.config.schema import DashboardConfig
from weatherdash.ingest.forecast_reducer import reduce_forecast
from weatherdash.ingest.parsers import parse_current, parse_forecast_samples
from weatherdash.models.weather import DailyForecast, WeatherSnapshot
from weatherdash.storage.kv_store import InMemoryKeyValueStore, SqliteKeyValueStore

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def london_current() -> dict:
    return load_fixture("owm_current_london.json")


@pytest.fixture
def london_forecast() -> dict:
    return load_fixture("owm_forecast_london.json")


@pytest.fixture
def london_snapshot(london_current: dict) -> WeatherSnapshot:
    return parse_current(london_current)


@pytest.fixture
def london_daily(london_forecast: dict) -> DailyForecast:
    return reduce_forecast(parse_forecast_samples(london_forecast), tz=UTC)


@pytest.fixture
def memory_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def sqlite_store(tmp_path: Path):
    store = SqliteKeyValueStore.open(tmp_path / "test.db")
    yield store
    store.close()


@pytest.fixture
def no_api_key_env(monkeypatch):
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)


@pytest.fixture
def default_config(tmp_path: Path) -> DashboardConfig:
    """Defaults with the DB under tmp_path and a UTC display zone."""
    return DashboardConfig(
        provider={"api_key": "test-key", "base_url": "https://test-owm.example.com"},
        storage={"db_path": str(tmp_path / "weatherdash.db")},
        display={"timezone": "UTC"},
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"api_key": "yaml-key", "timeout_seconds": 5},
        "storage": {"db_path": str(tmp_path / "yaml.db")},
        "display": {"timezone": "Europe/London"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
