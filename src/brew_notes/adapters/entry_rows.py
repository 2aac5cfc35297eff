"""Row mapping shared by the entry repositories."""

from collections.abc import Mapping
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from brew_notes.domain.entries import (
    DrinkEntry,
    DrinkMood,
    DrinkTemperature,
    DrinkType,
    MilkType,
)


def entry_to_row(entry: DrinkEntry) -> dict[str, object]:
    """Return storage column values for an entry.

    ``tags`` is a list and ``photo`` raw bytes; adapters encode both for
    their backend.
    """
    return {
        "id": str(entry.id),
        "drink_type": entry.drink_type.value,
        "specific_drink": entry.specific_drink,
        "location": entry.location,
        "temperature": entry.temperature.value,
        "milk_type": entry.milk_type.value,
        "price": str(entry.price) if entry.price is not None else None,
        "rating": entry.rating,
        "notes": entry.notes,
        "mood": entry.mood.value if entry.mood else None,
        "tags": list(entry.tags),
        "photo": entry.photo,
        "created_at": entry.created_at.isoformat(),
        "updated_at": entry.updated_at.isoformat(),
    }


def entry_from_row(row: Mapping[str, object]) -> DrinkEntry:
    """Build an entry from decoded column values."""
    price = row.get("price")
    mood = row.get("mood")
    photo = row.get("photo")
    return DrinkEntry(
        id=UUID(str(row["id"])),
        drink_type=DrinkType(row["drink_type"]),
        specific_drink=str(row.get("specific_drink") or ""),
        location=str(row.get("location") or ""),
        temperature=DrinkTemperature(row["temperature"]),
        milk_type=MilkType(row["milk_type"]),
        price=Decimal(str(price)) if price is not None else None,
        rating=int(row.get("rating") or 0),
        notes=str(row.get("notes") or ""),
        mood=DrinkMood(mood) if mood else None,
        tags=tuple(str(tag) for tag in row.get("tags") or []),
        photo=bytes(photo) if photo is not None else None,
        created_at=_parse_timestamp(str(row["created_at"])),
        updated_at=_parse_timestamp(str(row["updated_at"])),
    )


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed
