"""Helpers for calendar dates written as ``YYYY-MM-DD`` strings."""

from __future__ import annotations

import datetime as _dt

__all__ = [
    "add_days",
    "days_between",
    "is_leap_year",
    "format_date",
    "parse_date",
    "today",
]


def parse_date(text: str) -> _dt.date:
    """Parse a ``YYYY-MM-DD`` string into a :class:`datetime.date`.

    Raises ValueError when the text is too short or does not name a real day.
    """
    if len(text) < 10:
        raise ValueError(f"Invalid date: {text}")
    try:
        year = int(text[0:4])
        month = int(text[5:7])
        day = int(text[8:10])
        return _dt.date(year, month, day)
    except ValueError as exc:
        raise ValueError(f"Invalid date: {text}") from exc


def format_date(value: _dt.date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def add_days(date: str, days: int) -> str:
    """Return the date ``days`` days after ``date`` (negative goes back)."""
    return format_date(parse_date(date) + _dt.timedelta(days=days))


def days_between(date1: str, date2: str) -> int:
    """Return the number of calendar days from ``date1`` to ``date2``."""
    return (parse_date(date2) - parse_date(date1)).days


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def today() -> str:
    """Return the local date of today as ``YYYY-MM-DD``."""
    return format_date(_dt.date.today())