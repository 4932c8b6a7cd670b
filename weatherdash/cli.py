"""CLI entry point for the weather dashboard."""

import argparse
import json
import logging

from weatherdash.config.loader import get_config_value, load_config, resolve_timezone
from weatherdash.config.schema import DashboardConfig
from weatherdash.ingest.owm_client import OpenWeatherClient
from weatherdash.models.common import Theme, Unit
from weatherdash.storage.favorites import FavoritesStore
from weatherdash.storage.kv_store import SqliteKeyValueStore
from weatherdash.storage.preferences import PreferencesStore
from weatherdash.ui.controller import ViewController
from weatherdash.ui.view import ViewModel

DEFAULT_CONFIG = "config/weatherdash.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdash",
        description="Weather dashboard with forecasts and favorite cities",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=None, help="SQLite DB path (overrides config)")

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the dashboard web server")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    # current
    current_p = sub.add_parser("current", help="Show weather for a city")
    current_p.add_argument("city")

    # favorites list / add / remove
    fav_p = sub.add_parser("favorites", help="Favorite cities")
    fav_sub = fav_p.add_subparsers(dest="favorites_command")
    fav_sub.add_parser("list", help="List favorites")
    add_p = fav_sub.add_parser("add", help="Add a favorite")
    add_p.add_argument("city")
    rm_p = fav_sub.add_parser("remove", help="Remove a favorite")
    rm_p.add_argument("city")

    # unit / theme
    unit_p = sub.add_parser("unit", help="Show or set the temperature unit")
    unit_p.add_argument("value", nargs="?", choices=[u.value for u in Unit])
    theme_p = sub.add_parser("theme", help="Show or set the theme")
    theme_p.add_argument("value", nargs="?", choices=[t.value for t in Theme])

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. provider.base_url")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.db:
        config = config.model_copy(
            update={"storage": config.storage.model_copy(update={"db_path": args.db})}
        )

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "current":
        return _cmd_current(config, args)
    elif args.command == "favorites":
        return _cmd_favorites(config, args)
    elif args.command == "unit":
        return _cmd_unit(config, args)
    elif args.command == "theme":
        return _cmd_theme(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config: DashboardConfig, args) -> int:
    import uvicorn

    from weatherdash.dashboard import create_app

    app = create_app(config)
    uvicorn.run(
        app,
        host=args.host or config.server.host,
        port=args.port or config.server.port,
    )
    return 0


def _cmd_current(config: DashboardConfig, args) -> int:
    store = SqliteKeyValueStore.open(config.storage.db_path)
    view = ViewModel()
    controller = ViewController(
        OpenWeatherClient.from_config(config),
        FavoritesStore(store),
        PreferencesStore(store),
        view,
        tz=resolve_timezone(config),
        icon_base_url=config.provider.icon_base_url,
    )
    controller.state.unit = controller.preferences.get_unit()
    try:
        ok = controller.load_city(args.city)
    finally:
        store.close()

    if not ok or view.current is None:
        print(f"Error: {view.error}")
        return 1

    cur = view.current
    print(f"{cur.city_name} | {cur.date_time}")
    print(f"  {cur.temperature} (feels like {cur.feels_like}), {cur.description}")
    print(f"  Humidity: {cur.humidity} | Wind: {cur.wind_speed}")
    for day in view.forecast:
        print(f"  {day.day}: {day.temperature} {day.description}")
    return 0


def _cmd_favorites(config: DashboardConfig, args) -> int:
    store = SqliteKeyValueStore.open(config.storage.db_path)
    favorites = FavoritesStore(store)
    try:
        if args.favorites_command == "add":
            favorites.add(args.city)
        elif args.favorites_command == "remove":
            favorites.remove(args.city)
        elif args.favorites_command != "list":
            print("Use: favorites list | add CITY | remove CITY")
            return 1
        cities = favorites.list()
    finally:
        store.close()

    if not cities:
        print("No favorites")
    for city in cities:
        print(city)
    return 0


def _cmd_unit(config: DashboardConfig, args) -> int:
    store = SqliteKeyValueStore.open(config.storage.db_path)
    prefs = PreferencesStore(store)
    try:
        if args.value:
            prefs.set_unit(Unit(args.value))
        print(f"Unit: {prefs.get_unit().value}")
    finally:
        store.close()
    return 0


def _cmd_theme(config: DashboardConfig, args) -> int:
    store = SqliteKeyValueStore.open(config.storage.db_path)
    prefs = PreferencesStore(store)
    try:
        if args.value:
            prefs.set_theme(Theme(args.value))
        print(f"Theme: {prefs.get_theme().value}")
    finally:
        store.close()
    return 0


def _cmd_config(config: DashboardConfig, args) -> int:
    if args.config_command == "show":
        if config.provider.api_key:
            config = config.model_copy(
                update={"provider": config.provider.model_copy(update={"api_key": "***"})}
            )
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except KeyError as e:
            print(f"Error: {e}")
            return 1
        print(json.dumps(value, default=str))
        return 0
    else:
        print("Use: config show | config get KEY")
        return 1
