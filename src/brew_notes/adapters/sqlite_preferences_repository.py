"""SQLite repository for preferences."""

import sqlite3
from dataclasses import dataclass

from brew_notes.adapters.sqlite_database import transaction
from brew_notes.services.preferences import PreferencesRepository


@dataclass
class SqlitePreferencesRepository(PreferencesRepository):
    """Key-value preferences stored next to the entries."""

    connection: sqlite3.Connection

    def load(self) -> dict[str, str]:
        """Return every stored preference."""
        with transaction(self.connection, "load preferences"):
            rows = self.connection.execute(
                "SELECT key, value FROM preferences"
            ).fetchall()
        return {row["key"]: row["value"] for row in rows}

    def save(self, values: dict[str, str]) -> None:
        """Upsert preference values."""
        with transaction(self.connection, "save preferences"):
            self.connection.executemany(
                "INSERT INTO preferences (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                list(values.items()),
            )
