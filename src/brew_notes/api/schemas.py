"""Pydantic models for the journal HTTP API."""

import base64
import binascii
from datetime import datetime, time
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from brew_notes.domain.entries import (
    MAX_RATING,
    MIN_RATING,
    DrinkEntry,
    DrinkMood,
    DrinkTemperature,
    DrinkType,
    EntryDraft,
    MilkType,
    add_tag,
    parse_price,
)
from brew_notes.domain.preferences import Preferences
from brew_notes.domain.stats import JournalStats


class EntryPayload(BaseModel):
    """Entry fields submitted on create or edit.

    ``price`` is free text; anything that is not a number leaves it unset.
    """

    drink_type: DrinkType = DrinkType.COFFEE
    specific_drink: str = ""
    location: str = ""
    temperature: DrinkTemperature = DrinkTemperature.HOT
    milk_type: MilkType = MilkType.NONE
    price: str | None = None
    rating: int = Field(default=4, ge=MIN_RATING, le=MAX_RATING)
    notes: str = ""
    mood: DrinkMood | None = None
    tags: list[str] = Field(default_factory=list)
    photo_base64: str | None = None

    @field_validator("photo_base64")
    @classmethod
    def _check_base64(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError("photo_base64 is not valid base64") from exc
        return value

    def to_draft(self) -> EntryDraft:
        """Convert the payload to a domain draft."""
        return EntryDraft(
            drink_type=self.drink_type,
            specific_drink=self.specific_drink,
            location=self.location,
            temperature=self.temperature,
            milk_type=self.milk_type,
            price=parse_price(self.price),
            rating=self.rating,
            notes=self.notes,
            mood=self.mood,
            tags=_collect_tags(self.tags),
            photo=base64.b64decode(self.photo_base64) if self.photo_base64 else None,
        )


class EntryView(BaseModel):
    """Entry as returned by the API, without photo bytes."""

    id: UUID
    drink_type: DrinkType
    display_name: str
    specific_drink: str
    location: str
    temperature: DrinkTemperature
    milk_type: MilkType
    price: str | None
    rating: int
    notes: str
    mood: DrinkMood | None
    tags: list[str]
    has_photo: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entry(cls, entry: DrinkEntry) -> "EntryView":
        return cls(
            id=entry.id,
            drink_type=entry.drink_type,
            display_name=entry.display_name,
            specific_drink=entry.specific_drink,
            location=entry.location,
            temperature=entry.temperature,
            milk_type=entry.milk_type,
            price=f"{entry.price:.2f}" if entry.price is not None else None,
            rating=entry.rating,
            notes=entry.notes,
            mood=entry.mood,
            tags=list(entry.tags),
            has_photo=entry.has_photo,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )


class EntryList(BaseModel):
    """List of entries with the store revision it was read at."""

    revision: int
    entries: list[EntryView]


class StatsView(BaseModel):
    """Journal statistics."""

    total_count: int
    average_rating: float
    favorite_drink: str
    current_streak: int
    this_month_count: int

    @classmethod
    def from_stats(cls, stats: JournalStats) -> "StatsView":
        return cls(
            total_count=stats.total_count,
            average_rating=stats.average_rating,
            favorite_drink=stats.favorite_drink,
            current_streak=stats.current_streak,
            this_month_count=stats.this_month_count,
        )


class DrinkTypeView(BaseModel):
    """Drink type with its emoji and suggested specific drinks."""

    value: DrinkType
    emoji: str
    sub_types: list[str]


class PreferencesView(BaseModel):
    """Preferences as read and written over the API."""

    user_name: str
    user_handle: str
    dark_mode: bool
    daily_reminder: bool
    reminder_time: time
    default_drink_type: DrinkType

    @classmethod
    def from_preferences(cls, preferences: Preferences) -> "PreferencesView":
        return cls(
            user_name=preferences.user_name,
            user_handle=preferences.user_handle,
            dark_mode=preferences.dark_mode,
            daily_reminder=preferences.daily_reminder,
            reminder_time=preferences.reminder_time,
            default_drink_type=preferences.default_drink_type,
        )


class PreferencesUpdate(BaseModel):
    """Partial preferences update."""

    user_name: str | None = None
    user_handle: str | None = None
    dark_mode: bool | None = None
    daily_reminder: bool | None = None
    reminder_time: time | None = None
    default_drink_type: DrinkType | None = None


class TagPayload(BaseModel):
    """A single tag to attach to an entry."""

    tag: str = Field(min_length=1)


def _collect_tags(raw: list[str]) -> tuple[str, ...]:
    tags: tuple[str, ...] = ()
    for tag in raw:
        tags = add_tag(tags, tag)
    return tags
