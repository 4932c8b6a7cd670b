"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
OPENWEATHER_ICON_URL = "https://openweathermap.org/img/wn"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENWEATHER_BASE_URL
    icon_base_url: str = OPENWEATHER_ICON_URL
    api_key: str = ""
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = "data/weatherdash.db"


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    timezone: str = ""  # IANA name; empty means the process local zone
    forecast_days: int = Field(default=5, ge=1, le=5)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    storage: StorageConfig = StorageConfig()
    display: DisplayConfig = DisplayConfig()
    server: ServerConfig = ServerConfig()
