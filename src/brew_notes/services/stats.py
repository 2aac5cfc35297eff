"""Statistics over journal entry snapshots."""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, date, timedelta, tzinfo
from zoneinfo import ZoneInfo

from brew_notes.domain.entries import DrinkEntry
from brew_notes.domain.stats import NO_FAVORITE, JournalStats
from brew_notes.services.entries import EntryService


def total_count(entries: Sequence[DrinkEntry]) -> int:
    """Return the number of entries."""
    return len(entries)


def average_rating(entries: Sequence[DrinkEntry]) -> float:
    """Return the mean rating, or 0.0 for no entries."""
    if not entries:
        return 0.0
    return sum(entry.rating for entry in entries) / len(entries)


def favorite_drink(entries: Sequence[DrinkEntry]) -> str:
    """Return the most logged drink name.

    Ties go to the drink encountered first in ``entries``; for the store's
    default order that is the most recently logged one.
    """
    if not entries:
        return NO_FAVORITE
    counts = Counter(entry.display_name for entry in entries)
    # most_common orders equal counts by first insertion.
    name, _ = counts.most_common(1)[0]
    return name


def current_streak(
    entries: Sequence[DrinkEntry], today: date, tz: tzinfo = UTC
) -> int:
    """Count consecutive days with an entry, walking back from ``today``."""
    days = sorted({_local_day(entry, tz) for entry in entries}, reverse=True)
    streak = 0
    cursor = today
    for day in days:
        if day == cursor:
            streak += 1
            cursor -= timedelta(days=1)
        elif day < cursor:
            break
    return streak


def this_month_count(
    entries: Sequence[DrinkEntry], reference_date: date, tz: tzinfo = UTC
) -> int:
    """Count entries created in the same calendar month as ``reference_date``."""
    month = (reference_date.year, reference_date.month)
    days = (_local_day(entry, tz) for entry in entries)
    return sum(1 for day in days if (day.year, day.month) == month)


def summarize(
    entries: Sequence[DrinkEntry], today: date, tz: tzinfo = UTC
) -> JournalStats:
    """Compute every statistic for a snapshot."""
    return JournalStats(
        total_count=total_count(entries),
        average_rating=average_rating(entries),
        favorite_drink=favorite_drink(entries),
        current_streak=current_streak(entries, today, tz),
        this_month_count=this_month_count(entries, today, tz),
    )


def _local_day(entry: DrinkEntry, tz: tzinfo) -> date:
    return entry.created_at.astimezone(tz).date()


@dataclass
class StatsService:
    """Service for computing journal stats in the owner's timezone."""

    entry_service: EntryService
    timezone_name: str = "UTC"

    def get_summary(self) -> JournalStats:
        """Return stats for the current snapshot, with today in local time."""
        tz = ZoneInfo(self.timezone_name)
        today = self.entry_service.clock().astimezone(tz).date()
        return summarize(self.entry_service.all(), today, tz)
