"""SQLite connection setup for on-device storage."""

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from brew_notes.domain.errors import PersistenceError

MEMORY_PATH = ":memory:"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS drink_entries (
    id              TEXT PRIMARY KEY,
    drink_type      TEXT NOT NULL,
    specific_drink  TEXT NOT NULL DEFAULT '',
    location        TEXT NOT NULL DEFAULT '',
    temperature     TEXT NOT NULL,
    milk_type       TEXT NOT NULL,
    price           TEXT,
    rating          INTEGER NOT NULL,
    notes           TEXT NOT NULL DEFAULT '',
    mood            TEXT,
    tags            TEXT NOT NULL DEFAULT '[]',
    photo           BLOB,
    created_at      TEXT NOT NULL,
    updated_at      TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS preferences (
    key             TEXT PRIMARY KEY,
    value           TEXT NOT NULL
);
"""


def open_database(path: str) -> sqlite3.Connection:
    """Open the journal database, creating the file and schema if needed."""
    try:
        if path != MEMORY_PATH:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
        connection = sqlite3.connect(path, check_same_thread=False)
        connection.row_factory = sqlite3.Row
        connection.executescript(_SCHEMA)
    except (OSError, sqlite3.Error) as exc:
        raise PersistenceError(f"Cannot open database at {path}") from exc
    return connection


@contextmanager
def transaction(connection: sqlite3.Connection, action: str) -> Iterator[None]:
    """Run statements in one transaction, rolled back and wrapped on failure."""
    try:
        with connection:
            yield
    except sqlite3.Error as exc:
        raise PersistenceError(f"Failed to {action}") from exc
