from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone

from booking_manager.application.ports.booking_storage import BookingStoragePort
from booking_manager.application.utils.date_ranges import (
    does_overlap,
    is_date_range_valid,
    to_iso_date,
)
from booking_manager.application.utils.search import filter_bookings
from booking_manager.domain.entities.booking import (
    Booking,
    BookingInput,
    BookingsState,
    BookingValidationError,
    ValidationErrorKind,
)

INVALID_DATES_MESSAGE = "End date must be after start date."
OVERLAP_MESSAGE = "This booking overlaps an existing booking."


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_booking_id() -> str:
    return uuid.uuid4().hex


def empty_state() -> BookingsState:
    return BookingsState()


def demo_state() -> BookingsState:
    """Seed used when nothing usable is persisted yet."""
    now = utc_now_iso()
    return BookingsState(
        items=(
            Booking(
                id="b1",
                guest_name="Radoslav Todorov",
                start_date="2026-01-19",
                end_date="2026-01-20",
                notes="Demo booking",
                created_at=now,
                updated_at=now,
            ),
        ),
        last_error=None,
    )


def is_consistent(state: BookingsState) -> bool:
    """Check that every range is valid and no two bookings overlap."""
    items = state.items
    if not all(is_date_range_valid(b.start_date, b.end_date) for b in items):
        return False
    for i, booking in enumerate(items):
        for other in items[i + 1 :]:
            if does_overlap(booking.start_date, booking.end_date, other.start_date, other.end_date):
                return False
    return True


class BookingStore:
    """
    Owns the booking collection and applies the date-range rules before every mutation.

    Each operation swaps in a new immutable BookingsState. Outcomes are reported
    through `last_error` rather than exceptions; persistence is best-effort.
    """

    def __init__(
        self,
        storage: BookingStoragePort,
        seed: Callable[[], BookingsState] = demo_state,
        clock: Callable[[], str] = utc_now_iso,
        id_factory: Callable[[], str] = new_booking_id,
        on_persist_error: Callable[[Exception], None] | None = None,
    ) -> None:
        self._storage = storage
        self._clock = clock
        self._id_factory = id_factory
        self._on_persist_error = on_persist_error
        self._logger = logging.getLogger(__name__)
        # Held across validate-and-commit; reentrant for callers that also read the outcome
        self._lock = threading.RLock()
        self._state = self._load_initial_state(seed)

    def _load_initial_state(self, seed: Callable[[], BookingsState]) -> BookingsState:
        try:
            loaded = self._storage.load()
        except Exception as e:
            self._logger.warning("Failed to load bookings, using seed state", extra={"reason": str(e)})
            return seed()

        if loaded is None:
            return seed()
        if not is_consistent(loaded):
            self._logger.warning(
                "Persisted bookings violate range rules, using seed state",
                extra={"reason": "inconsistent"},
            )
            return seed()
        return loaded

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def state(self) -> BookingsState:
        return self._state

    @property
    def items(self) -> tuple[Booking, ...]:
        return self._state.items

    @property
    def last_error(self) -> BookingValidationError | None:
        return self._state.last_error

    def get_booking(self, booking_id: str) -> Booking | None:
        return next((b for b in self._state.items if b.id == booking_id), None)

    def search(self, query: str | None) -> list[Booking]:
        return filter_bookings(self._state.items, query)

    def create(self, booking_input: BookingInput) -> Booking | None:
        with self._lock:
            error = self._validate(booking_input)
            if error:
                self._reject(error)
                return None

            now = self._clock()
            booking = Booking(
                id=self._id_factory(),
                guest_name=booking_input.guest_name,
                start_date=to_iso_date(booking_input.start_date),
                end_date=to_iso_date(booking_input.end_date),
                notes=booking_input.notes,
                created_at=now,
                updated_at=now,
            )
            self._commit(BookingsState(items=(booking, *self._state.items), last_error=None))
        self._logger.info("Booking created", extra={"booking_id": booking.id, "guest_name": booking.guest_name})
        return booking

    def update(self, booking_id: str, patch: BookingInput) -> Booking | None:
        with self._lock:
            current = self.get_booking(booking_id)
            if current is None:
                return None

            error = self._validate(patch, ignore_id=booking_id)
            if error:
                self._reject(error, booking_id=booking_id)
                return None

            updated = replace(
                current,
                guest_name=patch.guest_name,
                start_date=to_iso_date(patch.start_date),
                end_date=to_iso_date(patch.end_date),
                notes=patch.notes,
                updated_at=self._clock(),
            )
            items = tuple(updated if b.id == booking_id else b for b in self._state.items)
            self._commit(BookingsState(items=items, last_error=None))
        self._logger.info("Booking updated", extra={"booking_id": booking_id})
        return updated

    def delete(self, booking_id: str) -> None:
        with self._lock:
            items = tuple(b for b in self._state.items if b.id != booking_id)
            removed = len(items) != len(self._state.items)
            self._commit(BookingsState(items=items, last_error=None))
        if removed:
            self._logger.info("Booking deleted", extra={"booking_id": booking_id})

    def clear_error(self) -> None:
        with self._lock:
            self._state = replace(self._state, last_error=None)

    def _validate(self, booking_input: BookingInput, ignore_id: str | None = None) -> BookingValidationError | None:
        if not is_date_range_valid(booking_input.start_date, booking_input.end_date):
            return BookingValidationError(kind=ValidationErrorKind.INVALID_DATES, message=INVALID_DATES_MESSAGE)

        for other in self._state.items:
            if ignore_id is not None and other.id == ignore_id:
                continue
            if does_overlap(booking_input.start_date, booking_input.end_date, other.start_date, other.end_date):
                return BookingValidationError(kind=ValidationErrorKind.OVERLAP, message=OVERLAP_MESSAGE)
        return None

    def _reject(self, error: BookingValidationError, booking_id: str | None = None) -> None:
        self._state = replace(self._state, last_error=error)
        self._logger.info(
            "Booking rejected",
            extra={"booking_id": booking_id, "error_kind": error.kind.value},
        )

    def _commit(self, state: BookingsState) -> None:
        self._state = state
        try:
            self._storage.save(state)
        except Exception as e:
            self._logger.warning("Failed to persist bookings", extra={"reason": str(e)})
            if self._on_persist_error is not None:
                self._on_persist_error(e)
