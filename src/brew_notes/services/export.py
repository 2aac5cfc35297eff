"""CSV export of journal entries."""

import csv
import io
from collections.abc import Iterable
from datetime import UTC, datetime, tzinfo

from brew_notes.domain.entries import DrinkEntry

NOON = 12

CSV_HEADER = (
    "Date",
    "Drink Type",
    "Specific Drink",
    "Location",
    "Temperature",
    "Milk",
    "Price",
    "Rating",
    "Notes",
)


def export_csv(entries: Iterable[DrinkEntry], tz: tzinfo = UTC) -> str:
    """Serialize entries to CSV with every field quoted.

    The header row is unquoted. Rows follow the order of ``entries``.
    """
    buffer = io.StringIO()
    buffer.write(",".join(CSV_HEADER) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for entry in entries:
        writer.writerow(
            [
                format_export_date(entry.created_at.astimezone(tz)),
                entry.drink_type.value,
                entry.specific_drink,
                entry.location,
                entry.temperature.value,
                entry.milk_type.value,
                f"{entry.price:.2f}" if entry.price is not None else "",
                str(entry.rating),
                entry.notes,
            ]
        )
    return buffer.getvalue()


def format_export_date(value: datetime) -> str:
    """Format a timestamp like ``Oct 18, 2026 at 3:45 PM``."""
    hour = value.hour % NOON or NOON
    return (
        f"{value:%b} {value.day}, {value.year} at "
        f"{hour}:{value:%M} {'AM' if value.hour < NOON else 'PM'}"
    )
