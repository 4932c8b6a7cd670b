"""YAML config loader with environment override and dotted-key lookup."""

import os
from datetime import tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

import yaml

from weatherdash.config.schema import DashboardConfig

API_KEY_ENV = "OPENWEATHER_API_KEY"


def load_config(path: str | Path | None = None) -> DashboardConfig:
    """Load and validate config from a YAML file.

    A missing file yields the defaults. ``OPENWEATHER_API_KEY`` in the
    environment overrides ``provider.api_key``.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}

    api_key = os.environ.get(API_KEY_ENV)
    if api_key:
        raw.setdefault("provider", {})["api_key"] = api_key

    return DashboardConfig(**raw)


def get_config_value(config: DashboardConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'provider.timeout_seconds'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def resolve_timezone(config: DashboardConfig) -> tzinfo | None:
    """The configured display zone, or None for the process local zone."""
    if not config.display.timezone:
        return None
    return ZoneInfo(config.display.timezone)
