"""Entry store service: the only write path for journal entries."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from typing import Literal, Protocol
from uuid import UUID, uuid4

from brew_notes.domain.entries import DrinkEntry, EntryDraft, add_tag, remove_tag
from brew_notes.domain.errors import NotFoundError

_logger = logging.getLogger(__name__)

ChangeKind = Literal["created", "updated", "deleted", "cleared"]


class EntryRepository(Protocol):
    """Persistence interface for journal entries."""

    def create_entry(self, entry: DrinkEntry) -> None:
        """Persist a new entry."""

    def get_entry(self, entry_id: UUID) -> DrinkEntry | None:
        """Return an entry by id, if present."""

    def list_entries(self) -> list[DrinkEntry]:
        """Return every entry in insertion order."""

    def update_entry(self, entry: DrinkEntry) -> bool:
        """Overwrite a stored entry. Return False when it does not exist."""

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete an entry. Return False when it does not exist."""

    def delete_all_entries(self) -> int:
        """Delete every entry and return how many were removed."""


@dataclass(frozen=True)
class EntryChange:
    """Notification emitted after a successful mutation."""

    kind: ChangeKind
    entry_id: UUID | None = None


EntryListener = Callable[[EntryChange], None]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class EntryService:
    """Service that creates, reads, edits and deletes journal entries."""

    repository: EntryRepository
    clock: Callable[[], datetime] = _utc_now
    _listeners: list[EntryListener] = field(default_factory=list, init=False)

    def create(self, draft: EntryDraft) -> DrinkEntry:
        """Persist a new entry built from the draft."""
        now = self.clock()
        entry = DrinkEntry.from_draft(uuid4(), draft, created_at=now, updated_at=now)
        self.repository.create_entry(entry)
        _logger.info("Entry created: id=%s", entry.id)
        self._emit(EntryChange(kind="created", entry_id=entry.id))
        return entry

    def all(self) -> list[DrinkEntry]:
        """Return every entry, most recently created first."""
        # sorted() is stable, so equal timestamps keep insertion order.
        return sorted(
            self.repository.list_entries(),
            key=lambda entry: entry.created_at,
            reverse=True,
        )

    def recent(self, limit: int = 5) -> list[DrinkEntry]:
        """Return the most recently created entries."""
        return self.all()[:limit]

    def get(self, entry_id: UUID) -> DrinkEntry:
        """Return an entry by id."""
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            raise NotFoundError(f"Entry {entry_id} not found")
        return entry

    def update(self, entry_id: UUID, draft: EntryDraft) -> DrinkEntry:
        """Replace every mutable field of an entry and refresh updated_at."""
        current = self.get(entry_id)
        updated_at = max(self.clock(), current.updated_at + timedelta(microseconds=1))
        updated = DrinkEntry.from_draft(
            current.id, draft, created_at=current.created_at, updated_at=updated_at
        )
        if not self.repository.update_entry(updated):
            raise NotFoundError(f"Entry {entry_id} not found")
        _logger.info("Entry updated: id=%s", entry_id)
        self._emit(EntryChange(kind="updated", entry_id=entry_id))
        return updated

    def tag_entry(self, entry_id: UUID, tag: str) -> DrinkEntry:
        """Attach a tag to an entry. Blank or existing tags leave it unchanged."""
        current = self.get(entry_id)
        tags = add_tag(current.tags, tag)
        if tags == current.tags:
            return current
        return self.update(entry_id, replace(current.draft(), tags=tags))

    def untag_entry(self, entry_id: UUID, tag: str) -> DrinkEntry:
        """Detach a tag from an entry."""
        current = self.get(entry_id)
        tags = remove_tag(current.tags, tag)
        if tags == current.tags:
            return current
        return self.update(entry_id, replace(current.draft(), tags=tags))

    def delete(self, entry_id: UUID) -> None:
        """Delete an entry."""
        if not self.repository.delete_entry(entry_id):
            raise NotFoundError(f"Entry {entry_id} not found")
        _logger.info("Entry deleted: id=%s", entry_id)
        self._emit(EntryChange(kind="deleted", entry_id=entry_id))

    def delete_all(self) -> int:
        """Delete every entry. Irreversible."""
        removed = self.repository.delete_all_entries()
        _logger.info("All entries cleared: removed=%s", removed)
        self._emit(EntryChange(kind="cleared"))
        return removed

    def subscribe(self, listener: EntryListener) -> Callable[[], None]:
        """Register a change listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, change: EntryChange) -> None:
        for listener in list(self._listeners):
            listener(change)
