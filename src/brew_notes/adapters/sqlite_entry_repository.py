"""SQLite repository for journal entries."""

import json
import sqlite3
from dataclasses import dataclass
from uuid import UUID

from brew_notes.adapters.entry_rows import entry_from_row, entry_to_row
from brew_notes.adapters.sqlite_database import transaction
from brew_notes.domain.entries import DrinkEntry
from brew_notes.services.entries import EntryRepository

_COLUMNS = (
    "id",
    "drink_type",
    "specific_drink",
    "location",
    "temperature",
    "milk_type",
    "price",
    "rating",
    "notes",
    "mood",
    "tags",
    "photo",
    "created_at",
    "updated_at",
)
_SELECT = f"SELECT {', '.join(_COLUMNS)} FROM drink_entries"


@dataclass
class SqliteEntryRepository(EntryRepository):
    """SQLite implementation for journal entries."""

    connection: sqlite3.Connection

    def create_entry(self, entry: DrinkEntry) -> None:
        """Insert an entry row."""
        row = _encode(entry)
        placeholders = ", ".join("?" for _ in _COLUMNS)
        with transaction(self.connection, "create entry"):
            self.connection.execute(
                f"INSERT INTO drink_entries ({', '.join(_COLUMNS)}) "
                f"VALUES ({placeholders})",
                [row[column] for column in _COLUMNS],
            )

    def get_entry(self, entry_id: UUID) -> DrinkEntry | None:
        """Return an entry by id."""
        with transaction(self.connection, "read entry"):
            row = self.connection.execute(
                f"{_SELECT} WHERE id = ?", (str(entry_id),)
            ).fetchone()
        if row is None:
            return None
        return _decode(row)

    def list_entries(self) -> list[DrinkEntry]:
        """Return every entry in insertion order."""
        with transaction(self.connection, "list entries"):
            rows = self.connection.execute(f"{_SELECT} ORDER BY rowid").fetchall()
        return [_decode(row) for row in rows]

    def update_entry(self, entry: DrinkEntry) -> bool:
        """Overwrite every column except id and created_at."""
        row = _encode(entry)
        columns = [c for c in _COLUMNS if c not in {"id", "created_at"}]
        assignments = ", ".join(f"{column} = ?" for column in columns)
        with transaction(self.connection, "update entry"):
            cursor = self.connection.execute(
                f"UPDATE drink_entries SET {assignments} WHERE id = ?",
                [*(row[column] for column in columns), row["id"]],
            )
        return cursor.rowcount > 0

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete an entry row."""
        with transaction(self.connection, "delete entry"):
            cursor = self.connection.execute(
                "DELETE FROM drink_entries WHERE id = ?", (str(entry_id),)
            )
        return cursor.rowcount > 0

    def delete_all_entries(self) -> int:
        """Delete every entry row."""
        with transaction(self.connection, "clear entries"):
            cursor = self.connection.execute("DELETE FROM drink_entries")
        return cursor.rowcount


def _encode(entry: DrinkEntry) -> dict[str, object]:
    row = entry_to_row(entry)
    row["tags"] = json.dumps(row["tags"])
    return row


def _decode(row: sqlite3.Row) -> DrinkEntry:
    values = dict(row)
    values["tags"] = json.loads(values["tags"] or "[]")
    return entry_from_row(values)
