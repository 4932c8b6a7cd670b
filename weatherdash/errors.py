"""Error kinds raised along the fetch path and by the geolocation outcome."""


class WeatherError(RuntimeError):
    """Base for every error the view controller maps to a user message."""


class InvalidArgument(WeatherError):
    """Neither a city nor a full coordinate pair was supplied."""


class CityNotFound(WeatherError):
    """The provider reported the requested city as unknown."""

    def __init__(self, city: str):
        super().__init__(f"City not found: {city!r}")
        self.city = city


class NetworkError(WeatherError):
    """Transport, HTTP status or payload parsing failure."""


class GeolocationError(WeatherError):
    pass


class GeolocationDenied(GeolocationError):
    pass


class GeolocationUnsupported(GeolocationError):
    pass
