"""Supabase repository for journal entries."""

import base64
from dataclasses import dataclass
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from brew_notes.adapters.entry_rows import entry_from_row, entry_to_row
from brew_notes.domain.entries import DrinkEntry
from brew_notes.domain.errors import PersistenceError
from brew_notes.services.entries import EntryRepository

_NIL_ID = UUID(int=0)

# PostgREST caps each response at its max-rows setting.
PAGE_SIZE = 1000

_COLUMNS = (
    "id, drink_type, specific_drink, location, temperature, milk_type, price, "
    "rating, notes, mood, tags, photo, created_at, updated_at"
)


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for journal entries."""

    client: Client
    table_name: str = "drink_entries"
    page_size: int = PAGE_SIZE

    def create_entry(self, entry: DrinkEntry) -> None:
        """Insert an entry row."""
        response = _execute(
            self.client.table(self.table_name).insert(_encode(entry)),
            "create entry",
        )
        if not response.data:
            raise PersistenceError("Failed to create entry")

    def get_entry(self, entry_id: UUID) -> DrinkEntry | None:
        """Return an entry by id."""
        response = _execute(
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("id", str(entry_id))
            .limit(1),
            "read entry",
        )
        if not response.data:
            return None
        return _decode(response.data[0])

    def list_entries(self) -> list[DrinkEntry]:
        """Return every entry ordered by creation time, reading page by page."""
        entries: list[DrinkEntry] = []
        start = 0
        while True:
            response = _execute(
                self.client.table(self.table_name)
                .select(_COLUMNS)
                .order("created_at", desc=False)
                .order("id", desc=False)
                .range(start, start + self.page_size - 1),
                "list entries",
            )
            rows = response.data or []
            entries.extend(_decode(row) for row in rows)
            if len(rows) < self.page_size:
                return entries
            start += self.page_size

    def update_entry(self, entry: DrinkEntry) -> bool:
        """Overwrite every column except id and created_at."""
        payload = _encode(entry)
        payload.pop("id")
        payload.pop("created_at")
        response = _execute(
            self.client.table(self.table_name)
            .update(payload)
            .eq("id", str(entry.id)),
            "update entry",
        )
        return bool(response.data)

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete an entry row."""
        response = _execute(
            self.client.table(self.table_name).delete().eq("id", str(entry_id)),
            "delete entry",
        )
        return bool(response.data)

    def delete_all_entries(self) -> int:
        """Delete every entry row."""
        # PostgREST refuses unfiltered deletes.
        response = _execute(
            self.client.table(self.table_name).delete().neq("id", str(_NIL_ID)),
            "clear entries",
        )
        return len(response.data or [])


def _execute(query, action: str):  # type: ignore[no-untyped-def]
    try:
        return query.execute()
    except (APIError, httpx.HTTPError) as exc:
        raise PersistenceError(f"Failed to {action}") from exc


def _encode(entry: DrinkEntry) -> dict[str, object]:
    row = entry_to_row(entry)
    if entry.photo is not None:
        row["photo"] = base64.b64encode(entry.photo).decode("ascii")
    return row


def _decode(row: dict[str, object]) -> DrinkEntry:
    values = dict(row)
    photo = values.get("photo")
    values["photo"] = base64.b64decode(str(photo)) if photo else None
    return entry_from_row(values)
