"""Weather dashboard: FastAPI backend serving the view-model and user actions."""

import logging
import threading
from datetime import UTC, datetime
from pathlib import Path
from typing import Literal

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel, Field

from weatherdash import __version__
from weatherdash.config.loader import resolve_timezone
from weatherdash.config.schema import DashboardConfig
from weatherdash.errors import GeolocationDenied, GeolocationUnsupported
from weatherdash.ingest.owm_client import OpenWeatherClient
from weatherdash.models.common import Coordinates
from weatherdash.models.state import HealthStatus
from weatherdash.storage.favorites import FavoritesStore
from weatherdash.storage.kv_store import SqliteKeyValueStore
from weatherdash.storage.preferences import PreferencesStore
from weatherdash.ui.controller import ViewController
from weatherdash.ui.view import ViewModel

logger = logging.getLogger(__name__)

DASHBOARD_HTML = Path(__file__).parent / "static" / "dashboard.html"


class SearchRequest(BaseModel):
    city: str


class LocationRequest(BaseModel):
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


class LocationErrorRequest(BaseModel):
    reason: Literal["denied", "unsupported"]


def create_app(
    config: DashboardConfig,
    client: OpenWeatherClient | None = None,
    store: SqliteKeyValueStore | None = None,
) -> FastAPI:
    """Wire the controller to its collaborators and expose it over HTTP.

    The controller is started before the app is returned. Every handler
    takes the same lock, so the controller runs one event at a time.
    """
    if client is None:
        client = OpenWeatherClient.from_config(config)
    if store is None:
        store = SqliteKeyValueStore.open(config.storage.db_path, check_same_thread=False)

    view = ViewModel()
    favorites = FavoritesStore(store)
    preferences = PreferencesStore(store)
    controller = ViewController(
        client,
        favorites,
        preferences,
        view,
        tz=resolve_timezone(config),
        icon_base_url=config.provider.icon_base_url,
    )
    lock = threading.Lock()

    with lock:
        controller.start()

    app = FastAPI(title="Weather Dashboard", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.controller = controller
    app.state.view = view

    # ── State + actions ─────────────────────────────────────────

    @app.get("/api/state")
    def get_state():
        with lock:
            return view.to_dict()

    @app.post("/api/search")
    def search(req: SearchRequest):
        with lock:
            controller.search(req.city)
            return view.to_dict()

    @app.post("/api/location/request")
    def request_location():
        with lock:
            controller.request_location()
            return view.to_dict()

    @app.post("/api/location")
    def location(req: LocationRequest):
        with lock:
            controller.on_location(Coordinates(lat=req.lat, lon=req.lon))
            return view.to_dict()

    @app.post("/api/location/error")
    def location_error(req: LocationErrorRequest):
        if req.reason == "denied":
            error = GeolocationDenied("permission denied")
        else:
            error = GeolocationUnsupported("geolocation not supported")
        with lock:
            controller.on_location_failed(error)
            return view.to_dict()

    @app.post("/api/favorites/toggle")
    def toggle_favorite():
        with lock:
            controller.toggle_favorite()
            return view.to_dict()

    @app.post("/api/favorites/{city:path}/select")
    def select_favorite(city: str):
        with lock:
            controller.select_favorite(city)
            return view.to_dict()

    @app.delete("/api/favorites/{city:path}")
    def remove_favorite(city: str):
        with lock:
            controller.remove_favorite(city)
            return view.to_dict()

    @app.post("/api/unit/toggle")
    def toggle_unit():
        with lock:
            controller.toggle_unit()
            return view.to_dict()

    @app.post("/api/theme/toggle")
    def toggle_theme():
        with lock:
            controller.toggle_theme()
            return view.to_dict()

    # ── Health ──────────────────────────────────────────────────

    @app.get("/api/health")
    def get_health():
        with lock:
            status = HealthStatus(
                db_connected=store.is_connected(),
                api_key_configured=bool(client.api_key),
                unit=controller.state.unit.value,
                theme=controller.state.theme.value,
                favorites_count=len(controller.state.favorites),
            )
        return {
            "db_ok": status.db_connected,
            "api_key_configured": status.api_key_configured,
            "unit": status.unit,
            "theme": status.theme,
            "favorites_count": status.favorites_count,
            "timestamp": datetime.now(UTC).isoformat(),
        }

    # ── Serve dashboard ─────────────────────────────────────────

    @app.get("/")
    def serve_dashboard():
        if DASHBOARD_HTML.exists():
            return FileResponse(DASHBOARD_HTML, media_type="text/html")
        return HTMLResponse("<h1>Dashboard not found</h1>", status_code=404)

    return app
