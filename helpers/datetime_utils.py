"""Shared utilities for parsing and formatting timesheet dates."""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import List, Optional, Union

UTC = timezone.utc

DateLike = Union[date, datetime, str, None]


def utc_now() -> datetime:
    return datetime.now(UTC)


def parse_date_input(value: str | None) -> Optional[date]:
    """Parse ISO ``YYYY-MM-DD`` or ``DD.MM.YYYY`` string into a ``date`` object."""

    if not value:
        return None
    text = value.strip()
    if not text:
        return None

    # ISO timestamps coming from date pickers carry a time part.
    if len(text) > 10 and text[4:5] == "-" and text[10] in "T ":
        text = text[:10]

    for fmt in ("%Y-%m-%d", "%d.%m.%Y"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def coerce_date(value: DateLike) -> Optional[date]:
    """Return ``value`` as a ``date``; strings go through :func:`parse_date_input`."""

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_date_input(value)


def window_dates(start: date, days: int) -> List[date]:
    return [start + timedelta(days=offset) for offset in range(days)]


def format_date_range(start: date, end: date) -> str:
    """``8 January - 12 January, 2024``"""
    return f"{start.day} {start:%B} - {end.day} {end:%B}, {end.year}"


def format_day_label(value: date) -> str:
    """``Jan 8``"""
    return f"{value:%b} {value.day}"


def format_hours(hours: float) -> str:
    if float(hours).is_integer():
        return str(int(hours))
    return f"{hours:g}"


__all__ = [
    "UTC",
    "coerce_date",
    "format_date_range",
    "format_day_label",
    "format_hours",
    "parse_date_input",
    "utc_now",
    "window_dates",
]
