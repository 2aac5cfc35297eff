"""Filtering and free-text search over entry snapshots."""

from collections.abc import Iterable

from brew_notes.domain.entries import DrinkEntry, DrinkType


def filter_entries(
    entries: Iterable[DrinkEntry],
    drink_type: DrinkType | None = None,
    query: str | None = None,
) -> list[DrinkEntry]:
    """Return entries matching the drink type and search query, order kept.

    The query matches case-insensitively against the specific drink, location
    and notes.
    """
    needle = query.casefold() if query else ""
    return [
        entry
        for entry in entries
        if (drink_type is None or entry.drink_type == drink_type)
        and (not needle or _matches(entry, needle))
    ]


def _matches(entry: DrinkEntry, needle: str) -> bool:
    return any(
        needle in value.casefold()
        for value in (entry.specific_drink, entry.location, entry.notes)
    )
