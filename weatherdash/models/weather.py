"""Weather data models for current conditions and forecast samples."""

from dataclasses import dataclass
from typing import TypeAlias

from weatherdash.models.common import Coordinates


@dataclass(frozen=True)
class WeatherSnapshot:
    city_name: str
    observed_at: int  # epoch seconds, UTC
    temperature_kelvin: float
    feels_like_kelvin: float
    humidity_percent: int
    wind_speed_mps: float
    condition_main: str
    condition_description: str
    icon_code: str
    coordinates: Coordinates
    sunrise: int
    sunset: int


@dataclass(frozen=True)
class ForecastSample:
    timestamp: int  # epoch seconds, UTC
    temperature_kelvin: float
    condition_main: str
    condition_description: str
    icon_code: str
    dt_txt: str = ""  # provider label, "YYYY-MM-DD HH:MM:SS"


# One sample per calendar day, earliest first, at most five entries.
DailyForecast: TypeAlias = list[ForecastSample]
