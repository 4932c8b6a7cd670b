"""Background condition selection from the weather group and time of day."""

from weatherdash.models.common import Background

_RAIN_GROUPS = frozenset({"rain", "drizzle", "thunderstorm"})


def is_daytime(observed_at: int, sunrise: int, sunset: int) -> bool:
    return sunrise < observed_at < sunset


def select_background(
    condition_main: str, observed_at: int, sunrise: int, sunset: int
) -> Background:
    """Pick the page background for a condition group such as "Clear" or "Rain"."""
    clear = (
        Background.CLEAR_DAY
        if is_daytime(observed_at, sunrise, sunset)
        else Background.CLEAR_NIGHT
    )
    condition = condition_main.lower()
    if condition == "clear":
        return clear
    if condition == "clouds":
        return Background.CLOUDS
    if condition in _RAIN_GROUPS:
        return Background.RAIN
    if condition == "snow":
        return Background.SNOW
    return clear
