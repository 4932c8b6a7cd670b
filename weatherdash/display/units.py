"""Temperature conversion and the display rounding rule.

Readings arrive in Kelvin. Values are rounded to whole degrees only at
display time. Toggling units later re-derives temperatures from the
displayed whole-degree strings, so repeated toggles can drift by a degree.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal

from weatherdash.models.common import Unit

KELVIN_OFFSET = 273.15

# Leading numeric prefix, the way a browser's parseFloat reads "21°C".
_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def kelvin_to_unit(kelvin: float, unit: Unit) -> float:
    celsius = kelvin - KELVIN_OFFSET
    if unit is Unit.CELSIUS:
        return celsius
    return celsius * 9 / 5 + 32


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32) * 5 / 9


def round_display(value: float) -> int:
    """Round to the nearest whole degree, ties away from zero."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_temperature(value: float, unit: Unit) -> str:
    if math.isnan(value):
        return f"--°{unit.letter}"
    return f"{round_display(value)}°{unit.letter}"


def format_kelvin(kelvin: float, unit: Unit) -> str:
    return format_temperature(kelvin_to_unit(kelvin, unit), unit)


def parse_displayed(text: str) -> float:
    """Read the number back out of a displayed temperature; NaN if there is none."""
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return math.nan
    return float(match.group(1))


def reconvert_displayed(text: str, to_unit: Unit) -> str:
    """Convert an already displayed temperature into ``to_unit``.

    Works from the rounded value on screen, not the original reading.
    """
    value = parse_displayed(text)
    if to_unit is Unit.CELSIUS:
        converted = fahrenheit_to_celsius(value)
    else:
        converted = celsius_to_fahrenheit(value)
    return format_temperature(converted, to_unit)
