"""Common enums and value types shared across models."""

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

CityName: TypeAlias = str


class Unit(StrEnum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @property
    def letter(self) -> str:
        return "C" if self is Unit.CELSIUS else "F"

    def toggled(self) -> "Unit":
        return Unit.FAHRENHEIT if self is Unit.CELSIUS else Unit.CELSIUS


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class Background(StrEnum):
    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    CLOUDS = "clouds"
    RAIN = "rain"
    SNOW = "snow"


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float
