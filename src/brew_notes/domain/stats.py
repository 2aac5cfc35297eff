"""Domain models for journal statistics."""

from dataclasses import dataclass

NO_FAVORITE = "None"


@dataclass(frozen=True)
class JournalStats:
    """Aggregates derived from a snapshot of entries."""

    total_count: int
    average_rating: float
    favorite_drink: str
    current_streak: int
    this_month_count: int
