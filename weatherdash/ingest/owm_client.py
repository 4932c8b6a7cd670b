"""OpenWeatherMap client for current conditions and the 5-day/3-hour forecast.

No retries and no caching: each call issues exactly one GET and failures
propagate once to the caller.
"""

import logging
from datetime import tzinfo

import httpx

from weatherdash.config.loader import resolve_timezone
from weatherdash.config.schema import OPENWEATHER_BASE_URL, DashboardConfig
from weatherdash.errors import CityNotFound, InvalidArgument, NetworkError
from weatherdash.ingest.forecast_reducer import MAX_FORECAST_DAYS, reduce_forecast
from weatherdash.ingest.parsers import parse_current, parse_forecast_samples
from weatherdash.models.weather import DailyForecast, WeatherSnapshot

logger = logging.getLogger(__name__)

NOT_FOUND_CODE = "404"


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        timeout: float = 10.0,
        tz: tzinfo | None = None,
        forecast_days: int = MAX_FORECAST_DAYS,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.tz = tz
        self.forecast_days = forecast_days

    @classmethod
    def from_config(cls, config: DashboardConfig) -> "OpenWeatherClient":
        return cls(
            api_key=config.provider.api_key,
            base_url=config.provider.base_url,
            timeout=config.provider.timeout_seconds,
            tz=resolve_timezone(config),
            forecast_days=config.display.forecast_days,
        )

    def fetch_current(
        self,
        city: str | None = None,
        lat: float | None = None,
        lon: float | None = None,
    ) -> WeatherSnapshot:
        """Fetch current conditions by city name, or by coordinates.

        A city name takes precedence when both are given.
        """
        if city:
            params: dict = {"q": city}
            target = city
        elif lat is not None and lon is not None:
            params = {"lat": lat, "lon": lon}
            target = f"{lat},{lon}"
        else:
            raise InvalidArgument("Either city name or coordinates must be provided")

        resp = self._get("/weather", params, target)
        if resp.status_code == 404:
            logger.info("Provider reports %r not found", target)
            raise CityNotFound(target)
        data = self._json(resp, target)
        if str(data.get("cod", "")) == NOT_FOUND_CODE:
            logger.info("Provider reports %r not found", target)
            raise CityNotFound(target)
        self._raise_for_status(resp, target)
        return parse_current(data)

    def fetch_forecast(self, lat: float, lon: float) -> DailyForecast:
        """Fetch the 3-hour forecast feed and reduce it to one sample per day."""
        target = f"{lat},{lon}"
        resp = self._get("/forecast", {"lat": lat, "lon": lon}, target)
        data = self._json(resp, target)
        self._raise_for_status(resp, target)
        samples = parse_forecast_samples(data)
        return reduce_forecast(samples, tz=self.tz, max_days=self.forecast_days)

    def _get(self, path: str, params: dict, target: str) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            return httpx.get(
                url, params={**params, "appid": self.api_key}, timeout=self.timeout
            )
        except httpx.RequestError as e:
            logger.error("OpenWeather request failed for %s: %s", target, e)
            raise NetworkError(f"Request error for {target!r}: {e}") from e

    def _json(self, resp: httpx.Response, target: str) -> dict:
        try:
            data = resp.json()
        except ValueError as e:
            logger.error("OpenWeather returned invalid JSON for %s: %s", target, e)
            raise NetworkError(f"Invalid JSON for {target!r}: {e}") from e
        if not isinstance(data, dict):
            raise NetworkError(f"Unexpected payload type for {target!r}")
        return data

    def _raise_for_status(self, resp: httpx.Response, target: str) -> None:
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("OpenWeather API error for %s: %s", target, e)
            raise NetworkError(f"HTTP {resp.status_code} for {target!r}") from e
