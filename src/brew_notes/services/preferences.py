"""User preferences service."""

import logging
from dataclasses import dataclass, fields, replace
from typing import Protocol

from brew_notes.config import parse_reminder_time
from brew_notes.domain.entries import DrinkType, EntryDraft
from brew_notes.domain.preferences import Preferences

_logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


class PreferencesRepository(Protocol):
    """Key-value persistence interface for preferences."""

    def load(self) -> dict[str, str]:
        """Return every stored preference value."""

    def save(self, values: dict[str, str]) -> None:
        """Store preference values, replacing existing keys."""


@dataclass
class PreferencesService:
    """Service for reading and writing the owner's preferences."""

    repository: PreferencesRepository

    def get(self) -> Preferences:
        """Return stored preferences, using defaults for missing values."""
        return _decode(self.repository.load())

    def update(self, **changes: object) -> Preferences:
        """Apply changes and persist the result."""
        updated = replace(self.get(), **changes)
        self.repository.save(_encode(updated))
        return updated

    def new_draft(self) -> EntryDraft:
        """Return a blank entry draft using the default drink type."""
        return EntryDraft(drink_type=self.get().default_drink_type)


def _encode(preferences: Preferences) -> dict[str, str]:
    return {
        "user_name": preferences.user_name,
        "user_handle": preferences.user_handle,
        "dark_mode": str(preferences.dark_mode).lower(),
        "daily_reminder": str(preferences.daily_reminder).lower(),
        "reminder_time": preferences.reminder_time.strftime("%H:%M:%S"),
        "default_drink_type": preferences.default_drink_type.value,
    }


def _decode(values: dict[str, str]) -> Preferences:
    known = {item.name for item in fields(Preferences)}
    decoded: dict[str, object] = {}
    for key, raw in values.items():
        if key not in known:
            continue
        if key in {"dark_mode", "daily_reminder"}:
            decoded[key] = raw.strip().lower() in _TRUE_VALUES
        elif key == "reminder_time":
            parsed = parse_reminder_time(raw)
            if parsed is None:
                _logger.warning("Ignoring invalid reminder_time=%s", raw)
                continue
            decoded[key] = parsed
        elif key == "default_drink_type":
            try:
                decoded[key] = DrinkType(raw)
            except ValueError:
                _logger.warning("Ignoring invalid default_drink_type=%s", raw)
        else:
            decoded[key] = raw
    return Preferences(**decoded)
