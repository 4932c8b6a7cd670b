"""View port and the in-memory view-model the HTTP layer serializes.

The controller only talks to the ``View`` protocol. Temperatures held by the
view-model are the displayed strings ("21°C"); unit toggles rewrite them in
place rather than recomputing from the original readings.
"""

from dataclasses import asdict, dataclass, field
from datetime import tzinfo
from typing import Callable, Protocol

from weatherdash.config.schema import OPENWEATHER_ICON_URL
from weatherdash.display.formatters import (
    forecast_day_name,
    format_date,
    format_humidity,
    format_wind,
    icon_url,
    local_datetime,
)
from weatherdash.display.units import format_kelvin
from weatherdash.models.common import Background, Theme, Unit
from weatherdash.models.weather import DailyForecast, WeatherSnapshot

DEFAULT_TITLE = "Weather App"


@dataclass
class CurrentWeatherView:
    city_name: str
    date_time: str
    temperature: str
    feels_like: str
    description: str
    icon_url: str
    humidity: str
    wind_speed: str


@dataclass
class ForecastDayView:
    day: str
    icon_url: str
    description: str
    temperature: str


def build_current_view(
    snapshot: WeatherSnapshot,
    unit: Unit,
    tz: tzinfo | None = None,
    icon_base_url: str = OPENWEATHER_ICON_URL,
) -> CurrentWeatherView:
    return CurrentWeatherView(
        city_name=snapshot.city_name,
        date_time=format_date(local_datetime(snapshot.observed_at, tz)),
        temperature=format_kelvin(snapshot.temperature_kelvin, unit),
        feels_like=format_kelvin(snapshot.feels_like_kelvin, unit),
        description=snapshot.condition_description,
        icon_url=icon_url(snapshot.icon_code, large=True, base_url=icon_base_url),
        humidity=format_humidity(snapshot.humidity_percent),
        wind_speed=format_wind(snapshot.wind_speed_mps),
    )


def build_forecast_view(
    forecast: DailyForecast,
    unit: Unit,
    tz: tzinfo | None = None,
    icon_base_url: str = OPENWEATHER_ICON_URL,
) -> list[ForecastDayView]:
    return [
        ForecastDayView(
            day=forecast_day_name(s.dt_txt, s.timestamp, tz),
            icon_url=icon_url(s.icon_code, base_url=icon_base_url),
            description=s.condition_description,
            temperature=format_kelvin(s.temperature_kelvin, unit),
        )
        for s in forecast
    ]


class View(Protocol):
    def render_weather(
        self, current: CurrentWeatherView, forecast: list[ForecastDayView]
    ) -> None: ...

    def rewrite_temperatures(self, convert: Callable[[str], str]) -> None: ...

    def render_favorites(self, favorites: list[str]) -> None: ...

    def set_favorite_button(self, visible: bool, is_favorite: bool) -> None: ...

    def set_background(self, background: Background) -> None: ...

    def set_theme(self, theme: Theme) -> None: ...

    def set_unit(self, unit: Unit) -> None: ...

    def set_title(self, title: str) -> None: ...

    def show_error(self, message: str) -> None: ...

    def clear_error(self) -> None: ...

    def request_geolocation(self) -> None: ...

    def end_geolocation(self) -> None: ...


@dataclass
class ViewModel:
    title: str = DEFAULT_TITLE
    theme: Theme = Theme.LIGHT
    unit: Unit = Unit.CELSIUS
    background: Background | None = None
    current: CurrentWeatherView | None = None
    forecast: list[ForecastDayView] = field(default_factory=list)
    favorites: list[str] = field(default_factory=list)
    favorite_button_visible: bool = False
    is_favorite: bool = False
    error: str | None = None
    geolocation_pending: bool = False

    def render_weather(
        self, current: CurrentWeatherView, forecast: list[ForecastDayView]
    ) -> None:
        self.current = current
        self.forecast = list(forecast)

    def rewrite_temperatures(self, convert: Callable[[str], str]) -> None:
        if self.current is not None:
            self.current.temperature = convert(self.current.temperature)
            self.current.feels_like = convert(self.current.feels_like)
        for day in self.forecast:
            day.temperature = convert(day.temperature)

    def render_favorites(self, favorites: list[str]) -> None:
        self.favorites = list(favorites)

    def set_favorite_button(self, visible: bool, is_favorite: bool) -> None:
        self.favorite_button_visible = visible
        self.is_favorite = is_favorite

    def set_background(self, background: Background) -> None:
        self.background = background

    def set_theme(self, theme: Theme) -> None:
        self.theme = theme

    def set_unit(self, unit: Unit) -> None:
        self.unit = unit

    def set_title(self, title: str) -> None:
        self.title = title

    def show_error(self, message: str) -> None:
        self.error = message

    def clear_error(self) -> None:
        self.error = None

    def request_geolocation(self) -> None:
        self.geolocation_pending = True

    def end_geolocation(self) -> None:
        self.geolocation_pending = False

    def to_dict(self) -> dict:
        data = asdict(self)
        data["theme"] = self.theme.value
        data["unit"] = self.unit.value
        data["background"] = self.background.value if self.background else None
        return data
