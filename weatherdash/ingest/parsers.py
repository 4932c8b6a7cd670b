"""Parse OpenWeatherMap JSON payloads into weather models."""

import logging

from weatherdash.errors import NetworkError
from weatherdash.models.common import Coordinates
from weatherdash.models.weather import ForecastSample, WeatherSnapshot

logger = logging.getLogger(__name__)


def parse_current(raw: dict) -> WeatherSnapshot:
    """Build a snapshot from a /weather response body."""
    try:
        main = raw["main"]
        condition = raw["weather"][0]
        sys_info = raw["sys"]
        return WeatherSnapshot(
            city_name=raw["name"],
            observed_at=int(raw["dt"]),
            temperature_kelvin=float(main["temp"]),
            feels_like_kelvin=float(main["feels_like"]),
            humidity_percent=int(main["humidity"]),
            wind_speed_mps=float((raw.get("wind") or {}).get("speed", 0.0)),
            condition_main=condition["main"],
            condition_description=condition.get("description", ""),
            icon_code=condition.get("icon", ""),
            coordinates=Coordinates(
                lat=float(raw["coord"]["lat"]), lon=float(raw["coord"]["lon"])
            ),
            sunrise=int(sys_info["sunrise"]),
            sunset=int(sys_info["sunset"]),
        )
    except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
        logger.error("Unexpected current-weather payload shape: %s", e)
        raise NetworkError(f"Unexpected current-weather payload: {e}") from e


def parse_forecast_samples(raw: dict) -> list[ForecastSample]:
    """Build the raw 3-hour sample list from a /forecast response body."""
    try:
        return [
            ForecastSample(
                timestamp=int(item["dt"]),
                temperature_kelvin=float(item["main"]["temp"]),
                condition_main=item["weather"][0]["main"],
                condition_description=item["weather"][0].get("description", ""),
                icon_code=item["weather"][0].get("icon", ""),
                dt_txt=item.get("dt_txt", ""),
            )
            for item in raw["list"]
        ]
    except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
        logger.error("Unexpected forecast payload shape: %s", e)
        raise NetworkError(f"Unexpected forecast payload: {e}") from e
