"""Application state owned by the view controller, and health status."""

from dataclasses import dataclass, field

from weatherdash.models.common import Theme, Unit


@dataclass
class AppState:
    unit: Unit = Unit.CELSIUS
    theme: Theme = Theme.LIGHT
    current_city: str = ""
    favorites: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class HealthStatus:
    db_connected: bool
    api_key_configured: bool
    unit: str
    theme: str
    favorites_count: int
