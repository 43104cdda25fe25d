from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: date | str) -> date:
    """Parse a calendar date from a date object or a YYYY-MM-DD string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise ValueError(f"Not a calendar date: {value!r}")


def to_iso_date(value: date | str) -> str:
    return parse_iso_date(value).isoformat()


def is_date_range_valid(start: date | str, end: date | str) -> bool:
    """Return True if end is strictly after start. Unparseable dates are invalid."""
    try:
        return parse_iso_date(end) > parse_iso_date(start)
    except ValueError:
        return False


def does_overlap(
    a_start: date | str,
    a_end: date | str,
    b_start: date | str,
    b_end: date | str,
) -> bool:
    """
    Check whether [a_start, a_end) and [b_start, b_end) intersect.
    Ranges that only share a boundary date do not overlap.
    """
    return parse_iso_date(a_start) < parse_iso_date(b_end) and parse_iso_date(b_start) < parse_iso_date(a_end)
