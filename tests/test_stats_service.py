"""Tests for journal statistics."""

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

from brew_notes.domain.entries import DrinkType, EntryDraft
from brew_notes.domain.stats import NO_FAVORITE
from brew_notes.services.entries import EntryService
from brew_notes.services.stats import (
    StatsService,
    average_rating,
    current_streak,
    favorite_drink,
    this_month_count,
    total_count,
)
from tests.conftest import NOW, FakeClock, make_entry

TODAY = NOW.date()


def _on(day_offset: int, hour: int = 12):
    return make_entry(
        created_at=datetime(TODAY.year, TODAY.month, TODAY.day, hour, tzinfo=UTC)
        - timedelta(days=day_offset)
    )


def test_average_rating_empty_is_zero() -> None:
    assert average_rating([]) == 0


def test_average_rating() -> None:
    entries = [make_entry(rating=2), make_entry(rating=4)]

    assert average_rating(entries) == 3.0


def test_total_count() -> None:
    assert total_count([make_entry(), make_entry()]) == 2
    assert total_count([]) == 0


def test_favorite_drink_empty() -> None:
    assert favorite_drink([]) == NO_FAVORITE


def test_favorite_drink_picks_largest_group() -> None:
    entries = [
        make_entry(specific_drink="Latte"),
        make_entry(specific_drink="Mocha"),
        make_entry(specific_drink="Mocha"),
    ]

    assert favorite_drink(entries) == "Mocha"


def test_favorite_drink_groups_empty_names_by_type() -> None:
    entries = [
        make_entry(drink_type=DrinkType.MATCHA, specific_drink=""),
        make_entry(drink_type=DrinkType.MATCHA, specific_drink=""),
        make_entry(specific_drink="Latte"),
    ]

    assert favorite_drink(entries) == "Matcha"


def test_favorite_drink_tie_goes_to_first_encountered() -> None:
    entries = [
        make_entry(specific_drink="Chai"),
        make_entry(specific_drink="Latte"),
        make_entry(specific_drink="Latte"),
        make_entry(specific_drink="Chai"),
    ]

    assert favorite_drink(entries) == "Chai"


def test_streak_empty() -> None:
    assert current_streak([], TODAY) == 0


def test_streak_today_and_yesterday() -> None:
    assert current_streak([_on(0), _on(1)], TODAY) == 2


def test_streak_stops_at_gap() -> None:
    assert current_streak([_on(0), _on(3)], TODAY) == 1


def test_streak_counts_multiple_entries_per_day_once() -> None:
    entries = [_on(0, hour=8), _on(0, hour=18), _on(1), _on(2)]

    assert current_streak(entries, TODAY) == 3


def test_streak_is_zero_without_entry_today() -> None:
    assert current_streak([_on(1), _on(2)], TODAY) == 0


def test_streak_skips_future_days() -> None:
    assert current_streak([_on(-1), _on(0), _on(1)], TODAY) == 2


def test_streak_uses_local_calendar_days() -> None:
    tz = ZoneInfo("America/Los_Angeles")
    # 02:00 UTC on the 18th is still the 17th in Los Angeles.
    late_evening = make_entry(created_at=datetime(2026, 10, 18, 2, tzinfo=UTC))

    assert current_streak([late_evening], date(2026, 10, 17), tz) == 1
    assert current_streak([late_evening], date(2026, 10, 18), tz) == 0


def test_this_month_count() -> None:
    entries = [
        make_entry(created_at=datetime(2026, 10, 1, tzinfo=UTC)),
        make_entry(created_at=datetime(2026, 10, 31, 23, tzinfo=UTC)),
        make_entry(created_at=datetime(2026, 9, 30, tzinfo=UTC)),
        make_entry(created_at=datetime(2025, 10, 15, tzinfo=UTC)),
    ]

    assert this_month_count(entries, date(2026, 10, 18)) == 2


def test_stats_service_summary(clock: FakeClock, entry_service: EntryService) -> None:
    entry_service.create(EntryDraft(specific_drink="Latte", rating=5))
    clock.advance(days=1)
    entry_service.create(EntryDraft(specific_drink="Latte", rating=3))
    entry_service.create(EntryDraft(specific_drink="Chai", rating=1))

    summary = StatsService(entry_service).get_summary()

    assert summary.total_count == 3
    assert summary.average_rating == 3.0
    assert summary.favorite_drink == "Latte"
    assert summary.current_streak == 2
    assert summary.this_month_count == 3
