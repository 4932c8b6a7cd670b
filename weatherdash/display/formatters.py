"""Display formatters for dates, wind, humidity and condition icons."""

from datetime import datetime, tzinfo

from weatherdash.config.schema import OPENWEATHER_ICON_URL
from weatherdash.display.units import round_display

MPS_TO_KMH = 3.6
DT_TXT_FORMAT = "%Y-%m-%d %H:%M:%S"


def local_datetime(epoch_seconds: int, tz: tzinfo | None = None) -> datetime:
    """Epoch seconds as an aware datetime in ``tz`` (process local zone if None)."""
    if tz is None:
        return datetime.fromtimestamp(epoch_seconds).astimezone()
    return datetime.fromtimestamp(epoch_seconds, tz)


def format_date(dt: datetime) -> str:
    """'Monday, January 15, 2024 at 02:30 PM'."""
    return f"{dt:%A}, {dt:%B} {dt.day}, {dt.year} at {format_time(dt)}"


def format_day(dt: datetime) -> str:
    return f"{dt:%a}"


def format_time(dt: datetime) -> str:
    return f"{dt:%I:%M %p}"


def forecast_day_name(dt_txt: str, timestamp: int, tz: tzinfo | None = None) -> str:
    """Short weekday for a forecast entry, read from the provider's date label."""
    if dt_txt:
        try:
            return format_day(datetime.strptime(dt_txt, DT_TXT_FORMAT))
        except ValueError:
            pass
    return format_day(local_datetime(timestamp, tz))


def format_wind(speed_mps: float) -> str:
    return f"{round_display(speed_mps * MPS_TO_KMH)} km/h"


def format_humidity(percent: int) -> str:
    return f"{percent}%"


def icon_url(icon_code: str, large: bool = False, base_url: str = OPENWEATHER_ICON_URL) -> str:
    suffix = "@2x" if large else ""
    return f"{base_url}/{icon_code}{suffix}.png"
