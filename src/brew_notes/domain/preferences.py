"""Domain models for user preferences."""

from dataclasses import dataclass
from datetime import time

from brew_notes.domain.entries import DrinkType


@dataclass(frozen=True)
class Preferences:
    """Display and reminder preferences for the journal owner."""

    user_name: str = "Coffee Lover"
    user_handle: str = "@brewmaster"
    dark_mode: bool = False
    daily_reminder: bool = True
    reminder_time: time = time(hour=9, minute=0)
    default_drink_type: DrinkType = DrinkType.COFFEE
