from __future__ import annotations

from booking_manager.application.ports.booking_storage import BookingStoragePort
from booking_manager.domain.entities.booking import BookingsState


class MemoryBookingStorage(BookingStoragePort):
    def __init__(self, initial: BookingsState | None = None) -> None:
        self._snapshot = initial
        self.save_count = 0

    def load(self) -> BookingsState | None:
        return self._snapshot

    def save(self, state: BookingsState) -> None:
        self._snapshot = state
        self.save_count += 1
