"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from brew_notes.adapters.sqlite_database import open_database
from brew_notes.adapters.sqlite_entry_repository import SqliteEntryRepository
from brew_notes.adapters.sqlite_preferences_repository import (
    SqlitePreferencesRepository,
)
from brew_notes.adapters.supabase_entry_repository import SupabaseEntryRepository
from brew_notes.adapters.supabase_preferences_repository import (
    SupabasePreferencesRepository,
)
from brew_notes.config import Settings
from brew_notes.services.entries import EntryRepository, EntryService
from brew_notes.services.preferences import (
    PreferencesRepository,
    PreferencesService,
)
from brew_notes.services.stats import StatsService

SQLITE_BACKEND = "sqlite"
SUPABASE_BACKEND = "supabase"


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    entry_service: EntryService
    stats_service: StatsService
    preferences_service: PreferencesService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    backend = resolved_settings.storage_backend.lower()
    entry_repository: EntryRepository
    preferences_repository: PreferencesRepository

    if backend == SQLITE_BACKEND:
        connection = open_database(resolved_settings.database_path)
        entry_repository = SqliteEntryRepository(connection)
        preferences_repository = SqlitePreferencesRepository(connection)

        async def close_resources() -> None:
            connection.close()

    elif backend == SUPABASE_BACKEND:
        if not (
            resolved_settings.supabase_url and resolved_settings.supabase_service_key
        ):
            raise ValueError(
                "supabase_url and supabase_service_key are required for the "
                "supabase backend"
            )
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        entry_repository = SupabaseEntryRepository(supabase_client)
        preferences_repository = SupabasePreferencesRepository(supabase_client)

        async def close_resources() -> None:
            return None

    else:
        raise ValueError(
            f"Unknown storage backend: {resolved_settings.storage_backend}"
        )

    entry_service = EntryService(entry_repository)
    stats_service = StatsService(
        entry_service=entry_service,
        timezone_name=resolved_settings.timezone,
    )
    preferences_service = PreferencesService(preferences_repository)

    return AppContainer(
        settings=resolved_settings,
        entry_service=entry_service,
        stats_service=stats_service,
        preferences_service=preferences_service,
        close_resources=close_resources,
    )
