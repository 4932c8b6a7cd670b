"""Weather dashboard: current conditions, a 5-day forecast and favorite cities."""

__version__ = "0.1.0"
