"""Domain models for drink journal entries."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from uuid import UUID

from brew_notes.domain.errors import InvalidEntryError

MIN_RATING = 0
MAX_RATING = 5
DEFAULT_RATING = 4


class DrinkType(str, Enum):
    """Top-level drink category."""

    COFFEE = "Coffee"
    MATCHA = "Matcha"
    OTHER = "Other"

    @property
    def emoji(self) -> str:
        return _DRINK_EMOJI[self]

    @property
    def sub_types(self) -> tuple[str, ...]:
        """Suggested specific drinks for this category."""
        return _DRINK_SUB_TYPES[self]


class DrinkTemperature(str, Enum):
    """Serving temperature."""

    HOT = "Hot"
    ICED = "Iced"


class MilkType(str, Enum):
    """Milk added to the drink."""

    NONE = "None"
    DAIRY = "Dairy"
    OAT = "Oat"
    ALMOND = "Almond"
    SOY = "Soy"
    COCONUT = "Coconut"


class DrinkMood(str, Enum):
    """Mood associated with a drink."""

    RELAXING = "Relaxing"
    ENERGIZING = "Energizing"
    SOCIAL = "Social"
    PRODUCTIVE = "Productive"
    COZY = "Cozy"
    ADVENTUROUS = "Adventurous"

    @property
    def icon(self) -> str:
        return _MOOD_ICONS[self]


_DRINK_EMOJI = {
    DrinkType.COFFEE: "☕",
    DrinkType.MATCHA: "\U0001f375",
    DrinkType.OTHER: "\U0001f964",
}

_DRINK_SUB_TYPES = {
    DrinkType.COFFEE: (
        "Espresso",
        "Latte",
        "Cappuccino",
        "Americano",
        "Cold Brew",
        "Mocha",
        "Flat White",
        "Macchiato",
    ),
    DrinkType.MATCHA: (
        "Traditional",
        "Latte",
        "Smoothie",
        "Iced Matcha",
        "Matcha Frappe",
    ),
    DrinkType.OTHER: ("Tea", "Hot Chocolate", "Chai", "Golden Milk", "Other"),
}

_MOOD_ICONS = {
    DrinkMood.RELAXING: "\U0001f60c",
    DrinkMood.ENERGIZING: "⚡",
    DrinkMood.SOCIAL: "\U0001f465",
    DrinkMood.PRODUCTIVE: "\U0001f4aa",
    DrinkMood.COZY: "\U0001f6cb\ufe0f",
    DrinkMood.ADVENTUROUS: "\U0001f31f",
}


@dataclass(frozen=True)
class EntryDraft:
    """Mutable fields of an entry, as supplied on create or edit.

    Duplicate tags are dropped keeping the first occurrence. Ratings outside
    0..5 and negative prices raise ``InvalidEntryError``.
    """

    drink_type: DrinkType = DrinkType.COFFEE
    specific_drink: str = ""
    location: str = ""
    temperature: DrinkTemperature = DrinkTemperature.HOT
    milk_type: MilkType = MilkType.NONE
    price: Decimal | None = None
    rating: int = DEFAULT_RATING
    notes: str = ""
    mood: DrinkMood | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    photo: bytes | None = None

    def __post_init__(self) -> None:
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise InvalidEntryError(
                f"rating must be between {MIN_RATING} and {MAX_RATING}, "
                f"got {self.rating}"
            )
        if self.price is not None and self.price < 0:
            raise InvalidEntryError(f"price must not be negative, got {self.price}")
        object.__setattr__(self, "tags", tuple(dict.fromkeys(self.tags)))


@dataclass(frozen=True)
class DrinkEntry:
    """Represents a stored journal entry."""

    id: UUID
    drink_type: DrinkType
    specific_drink: str
    location: str
    temperature: DrinkTemperature
    milk_type: MilkType
    price: Decimal | None
    rating: int
    notes: str
    mood: DrinkMood | None
    tags: tuple[str, ...]
    photo: bytes | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_draft(
        cls,
        entry_id: UUID,
        draft: EntryDraft,
        created_at: datetime,
        updated_at: datetime,
    ) -> "DrinkEntry":
        """Build an entry from draft fields and system-assigned values."""
        return cls(
            id=entry_id,
            drink_type=draft.drink_type,
            specific_drink=draft.specific_drink,
            location=draft.location,
            temperature=draft.temperature,
            milk_type=draft.milk_type,
            price=draft.price,
            rating=draft.rating,
            notes=draft.notes,
            mood=draft.mood,
            tags=draft.tags,
            photo=draft.photo,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def display_name(self) -> str:
        """Specific drink, or the drink type when it is empty."""
        return self.specific_drink or self.drink_type.value

    @property
    def has_photo(self) -> bool:
        return self.photo is not None

    def draft(self) -> EntryDraft:
        """Return the mutable fields of this entry."""
        return EntryDraft(
            drink_type=self.drink_type,
            specific_drink=self.specific_drink,
            location=self.location,
            temperature=self.temperature,
            milk_type=self.milk_type,
            price=self.price,
            rating=self.rating,
            notes=self.notes,
            mood=self.mood,
            tags=self.tags,
            photo=self.photo,
        )


def add_tag(tags: tuple[str, ...], tag: str) -> tuple[str, ...]:
    """Append a trimmed tag unless it is empty or already present."""
    trimmed = tag.strip()
    if not trimmed or trimmed in tags:
        return tags
    return (*tags, trimmed)


def remove_tag(tags: tuple[str, ...], tag: str) -> tuple[str, ...]:
    """Remove a tag by exact match."""
    return tuple(existing for existing in tags if existing != tag)


def parse_price(raw: str | None) -> Decimal | None:
    """Parse user price input, returning None for blank or non-numeric text."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def share_text(entry: DrinkEntry) -> str:
    """Return the text shared from an entry's detail view."""
    stars = "★" * entry.rating
    return f"{entry.drink_type.emoji} {entry.display_name} - {stars}\n{entry.notes}"
