"""Collapse the 5-day/3-hour forecast feed into one sample per day."""

from datetime import UTC, datetime, tzinfo

from weatherdash.display.formatters import local_datetime
from weatherdash.models.weather import DailyForecast, ForecastSample

MAX_FORECAST_DAYS = 5
MIDDAY_HOUR = 12


def reduce_forecast(
    samples: list[ForecastSample],
    tz: tzinfo | None = None,
    max_days: int = MAX_FORECAST_DAYS,
) -> DailyForecast:
    """Pick the sample closest to midday for each calendar day.

    Days are keyed by the UTC date of each timestamp, while "closest to
    midday" is measured on the hour in ``tz`` (the process local zone when
    None). Days keep first-seen order; within a day the earliest of equally
    close samples wins. At most ``max_days`` entries are returned.
    """
    by_day: dict[str, list[ForecastSample]] = {}
    for sample in samples:
        by_day.setdefault(_utc_date(sample.timestamp), []).append(sample)

    daily: DailyForecast = []
    for day_samples in by_day.values():
        midday = day_samples[0]
        for sample in day_samples:
            if _distance_from_midday(sample, tz) < _distance_from_midday(midday, tz):
                midday = sample
        daily.append(midday)

    return daily[:max_days]


def _utc_date(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp, UTC).strftime("%Y-%m-%d")


def _distance_from_midday(sample: ForecastSample, tz: tzinfo | None) -> int:
    return abs(local_datetime(sample.timestamp, tz).hour - MIDDAY_HOUR)
