"""SQLite connection helper and schema migrations for the preferences store."""

import importlib
import sqlite3
from pathlib import Path

MIGRATIONS_PACKAGE = "weatherdash.storage.migrations"
MEMORY_DB = ":memory:"


def connect(db_path: str | Path, check_same_thread: bool = True) -> sqlite3.Connection:
    """Open a SQLite connection in WAL mode, creating the parent directory."""
    if str(db_path) != MEMORY_DB:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=check_same_thread)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def run_migrations(conn: sqlite3.Connection) -> list[str]:
    """Apply pending migrations in name order. Returns the names applied now."""
    conn.execute(
        "CREATE TABLE IF NOT EXISTS schema_versions ("
        "  version TEXT PRIMARY KEY,"
        "  applied_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP"
        ")"
    )
    conn.commit()

    applied = {
        row[0] for row in conn.execute("SELECT version FROM schema_versions")
    }

    newly_applied = []
    for name in _discover_migrations():
        if name in applied:
            continue
        importlib.import_module(f"{MIGRATIONS_PACKAGE}.{name}").up(conn)
        conn.execute("INSERT INTO schema_versions (version) VALUES (?)", (name,))
        conn.commit()
        newly_applied.append(name)

    return newly_applied


def _discover_migrations() -> list[str]:
    """Migration modules follow the v###_*.py naming convention."""
    migrations_dir = Path(__file__).parent / "migrations"
    return sorted(p.stem for p in migrations_dir.glob("v[0-9]*_*.py"))
