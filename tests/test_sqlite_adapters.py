"""Tests for SQLite adapter implementations."""

from dataclasses import replace
from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from brew_notes.adapters.sqlite_database import open_database
from brew_notes.adapters.sqlite_entry_repository import SqliteEntryRepository
from brew_notes.adapters.sqlite_preferences_repository import (
    SqlitePreferencesRepository,
)
from brew_notes.domain.entries import DrinkMood, EntryDraft
from brew_notes.domain.errors import NotFoundError, PersistenceError
from brew_notes.services.entries import EntryService
from tests.conftest import NOW, FakeClock, make_entry


def _full_entry():
    return replace(
        make_entry(specific_drink="Cold Brew", notes="Chocolatey"),
        price=Decimal("5.25"),
        mood=DrinkMood.ADVENTUROUS,
        tags=("summer", "Summer"),
        photo=b"\x89PNG\r\n\x1a\nfake",
    )


def test_entry_roundtrip_preserves_every_field(tmp_path) -> None:
    repository = SqliteEntryRepository(open_database(str(tmp_path / "j.db")))
    entry = _full_entry()

    repository.create_entry(entry)

    assert repository.get_entry(entry.id) == entry


def test_entries_survive_reopen(tmp_path) -> None:
    path = str(tmp_path / "nested" / "journal.db")
    first = open_database(path)
    entry = _full_entry()
    SqliteEntryRepository(first).create_entry(entry)
    first.close()

    reopened = SqliteEntryRepository(open_database(path))

    assert reopened.list_entries() == [entry]


def test_list_entries_in_insertion_order() -> None:
    repository = SqliteEntryRepository(open_database(":memory:"))
    later = make_entry(created_at=NOW + timedelta(hours=1))
    earlier = make_entry(created_at=NOW)
    repository.create_entry(later)
    repository.create_entry(earlier)

    assert [entry.id for entry in repository.list_entries()] == [later.id, earlier.id]


def test_update_and_delete_report_missing_rows() -> None:
    repository = SqliteEntryRepository(open_database(":memory:"))
    missing = make_entry()

    assert repository.update_entry(missing) is False
    assert repository.delete_entry(missing.id) is False
    assert repository.get_entry(uuid4()) is None


def test_update_keeps_created_at() -> None:
    repository = SqliteEntryRepository(open_database(":memory:"))
    entry = make_entry()
    repository.create_entry(entry)
    edited = replace(
        entry,
        notes="edited",
        created_at=NOW + timedelta(days=3),
        updated_at=NOW + timedelta(hours=1),
    )

    assert repository.update_entry(edited) is True
    stored = repository.get_entry(entry.id)

    assert stored is not None
    assert stored.notes == "edited"
    assert stored.created_at == entry.created_at
    assert stored.updated_at == NOW + timedelta(hours=1)


def test_delete_all_entries_counts_rows() -> None:
    repository = SqliteEntryRepository(open_database(":memory:"))
    for _ in range(3):
        repository.create_entry(make_entry())

    assert repository.delete_all_entries() == 3
    assert repository.list_entries() == []


def test_duplicate_id_insert_raises_persistence_error() -> None:
    repository = SqliteEntryRepository(open_database(":memory:"))
    entry = make_entry()
    repository.create_entry(entry)

    with pytest.raises(PersistenceError):
        repository.create_entry(entry)
    assert len(repository.list_entries()) == 1


def test_closed_connection_raises_persistence_error() -> None:
    connection = open_database(":memory:")
    repository = SqliteEntryRepository(connection)
    connection.close()

    with pytest.raises(PersistenceError):
        repository.list_entries()


def test_open_database_in_unwritable_location(tmp_path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")

    with pytest.raises(PersistenceError):
        open_database(str(blocker / "journal.db"))


def test_entry_service_on_sqlite() -> None:
    service = EntryService(
        SqliteEntryRepository(open_database(":memory:")), clock=FakeClock()
    )
    created = service.create(EntryDraft(specific_drink="Macchiato"))

    service.update(created.id, EntryDraft(specific_drink="Cortado"))

    assert [entry.specific_drink for entry in service.all()] == ["Cortado"]
    with pytest.raises(NotFoundError):
        service.delete(uuid4())
    assert len(service.all()) == 1


def test_preferences_upsert() -> None:
    repository = SqlitePreferencesRepository(open_database(":memory:"))

    repository.save({"dark_mode": "true", "user_name": "Sam"})
    repository.save({"dark_mode": "false"})

    assert repository.load() == {"dark_mode": "false", "user_name": "Sam"}
