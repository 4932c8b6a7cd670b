"""Repository for the string-keyed preferences table."""

import sqlite3


def get_value(conn: sqlite3.Connection, key: str) -> str | None:
    row = conn.execute(
        "SELECT value FROM preferences WHERE key = ?", (key,)
    ).fetchone()
    if row is None:
        return None
    return row[0]


def set_value(conn: sqlite3.Connection, key: str, value: str) -> None:
    """Insert or overwrite a value."""
    conn.execute(
        "INSERT INTO preferences (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
        "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP",
        (key, value),
    )
    conn.commit()

