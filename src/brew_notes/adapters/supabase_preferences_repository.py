"""Supabase repository for preferences."""

from dataclasses import dataclass

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from brew_notes.domain.errors import PersistenceError
from brew_notes.services.preferences import PreferencesRepository


@dataclass
class SupabasePreferencesRepository(PreferencesRepository):
    """Supabase implementation for key-value preferences."""

    client: Client
    table_name: str = "preferences"

    def load(self) -> dict[str, str]:
        """Return every stored preference."""
        try:
            response = self.client.table(self.table_name).select("key, value").execute()
        except (APIError, httpx.HTTPError) as exc:
            raise PersistenceError("Failed to load preferences") from exc
        return {str(row["key"]): str(row["value"]) for row in response.data or []}

    def save(self, values: dict[str, str]) -> None:
        """Upsert preference values."""
        payload = [{"key": key, "value": value} for key, value in values.items()]
        if not payload:
            return
        try:
            self.client.table(self.table_name).upsert(payload).execute()
        except (APIError, httpx.HTTPError) as exc:
            raise PersistenceError("Failed to save preferences") from exc
