from __future__ import annotations

from collections.abc import Iterable

from booking_manager.domain.entities.booking import Booking


def matches_query(booking: Booking, query: str) -> bool:
    needle = query.strip().lower()
    if not needle:
        return True
    return (
        needle in booking.guest_name.lower()
        or needle in (booking.notes or "").lower()
        or needle in booking.start_date
        or needle in booking.end_date
    )


def filter_bookings(items: Iterable[Booking], query: str | None) -> list[Booking]:
    """Filter bookings by a case-insensitive substring over name, notes and dates."""
    if not query or not query.strip():
        return list(items)
    return [b for b in items if matches_query(b, query)]
