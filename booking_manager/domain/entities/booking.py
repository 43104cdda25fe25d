from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ValidationErrorKind(str, Enum):
    INVALID_DATES = "INVALID_DATES"
    OVERLAP = "OVERLAP"


@dataclass(frozen=True)
class BookingValidationError:
    kind: ValidationErrorKind
    message: str


@dataclass(frozen=True)
class BookingInput:
    guest_name: str
    start_date: date | str
    end_date: date | str
    notes: str | None = None


@dataclass(frozen=True)
class Booking:
    id: str
    guest_name: str
    start_date: str  # YYYY-MM-DD, inclusive
    end_date: str  # YYYY-MM-DD, exclusive
    notes: str | None = None
    created_at: str = ""
    updated_at: str = ""


@dataclass(frozen=True)
class BookingsState:
    items: tuple[Booking, ...] = ()
    last_error: BookingValidationError | None = None
