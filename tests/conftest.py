"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from brew_notes.config import Settings
from brew_notes.containers import AppContainer
from brew_notes.domain.entries import (
    DrinkEntry,
    DrinkTemperature,
    DrinkType,
    EntryDraft,
    MilkType,
)
from brew_notes.domain.errors import PersistenceError
from brew_notes.services.entries import EntryRepository, EntryService
from brew_notes.services.preferences import (
    PreferencesRepository,
    PreferencesService,
)
from brew_notes.services.stats import StatsService

NOW = datetime(2026, 10, 18, 15, 45, tzinfo=UTC)


@dataclass
class InMemoryEntryRepository(EntryRepository):
    """In-memory entry repository for tests."""

    entries: dict[UUID, DrinkEntry] = field(default_factory=dict)
    fail_writes: bool = False

    def create_entry(self, entry: DrinkEntry) -> None:
        self._check_writable()
        self.entries[entry.id] = entry

    def get_entry(self, entry_id: UUID) -> DrinkEntry | None:
        return self.entries.get(entry_id)

    def list_entries(self) -> list[DrinkEntry]:
        return list(self.entries.values())

    def update_entry(self, entry: DrinkEntry) -> bool:
        self._check_writable()
        if entry.id not in self.entries:
            return False
        self.entries[entry.id] = entry
        return True

    def delete_entry(self, entry_id: UUID) -> bool:
        self._check_writable()
        return self.entries.pop(entry_id, None) is not None

    def delete_all_entries(self) -> int:
        self._check_writable()
        removed = len(self.entries)
        self.entries.clear()
        return removed

    def _check_writable(self) -> None:
        if self.fail_writes:
            raise PersistenceError("storage unavailable")


@dataclass
class InMemoryPreferencesRepository(PreferencesRepository):
    """In-memory preferences repository for tests."""

    values: dict[str, str] = field(default_factory=dict)

    def load(self) -> dict[str, str]:
        return dict(self.values)

    def save(self, values: dict[str, str]) -> None:
        self.values.update(values)


@dataclass
class FakeClock:
    """Clock returning a controllable time."""

    now: datetime = NOW

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


def make_entry(  # noqa: PLR0913
    created_at: datetime = NOW,
    drink_type: DrinkType = DrinkType.COFFEE,
    specific_drink: str = "Latte",
    location: str = "",
    notes: str = "",
    rating: int = 4,
) -> DrinkEntry:
    """Build a stored entry without going through a repository."""
    return DrinkEntry(
        id=uuid4(),
        drink_type=drink_type,
        specific_drink=specific_drink,
        location=location,
        temperature=DrinkTemperature.HOT,
        milk_type=MilkType.NONE,
        price=None,
        rating=rating,
        notes=notes,
        mood=None,
        tags=(),
        photo=None,
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="sqlite", database_path=":memory:")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def entry_repository() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()


@pytest.fixture
def entry_service(
    entry_repository: InMemoryEntryRepository, clock: FakeClock
) -> EntryService:
    return EntryService(entry_repository, clock=clock)


@pytest.fixture
def sample_draft() -> EntryDraft:
    return EntryDraft(
        drink_type=DrinkType.MATCHA,
        specific_drink="Iced Matcha",
        location="Corner Cafe",
        temperature=DrinkTemperature.ICED,
        milk_type=MilkType.OAT,
        rating=5,
        notes="Grassy and smooth",
        tags=("morning", "treat"),
    )


@pytest.fixture
def container(settings: Settings, entry_service: EntryService) -> AppContainer:
    stats_service = StatsService(
        entry_service=entry_service, timezone_name=settings.timezone
    )
    preferences_service = PreferencesService(InMemoryPreferencesRepository())

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        entry_service=entry_service,
        stats_service=stats_service,
        preferences_service=preferences_service,
        close_resources=close_resources,
    )
