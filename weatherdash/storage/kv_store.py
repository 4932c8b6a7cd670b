"""Key-value port for persisted dashboard state, with SQLite and in-memory adapters."""

import sqlite3
from pathlib import Path
from typing import Protocol

from weatherdash.storage import state_repo
from weatherdash.storage.database import connect, run_migrations


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class SqliteKeyValueStore:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    @classmethod
    def open(cls, db_path: str | Path, check_same_thread: bool = True) -> "SqliteKeyValueStore":
        conn = connect(db_path, check_same_thread=check_same_thread)
        run_migrations(conn)
        return cls(conn)

    def get(self, key: str) -> str | None:
        return state_repo.get_value(self.conn, key)

    def set(self, key: str, value: str) -> None:
        state_repo.set_value(self.conn, key, value)

    def is_connected(self) -> bool:
        try:
            self.conn.execute("SELECT 1")
            return True
        except sqlite3.Error:
            return False

    def close(self) -> None:
        self.conn.close()


class InMemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
