from __future__ import annotations

from abc import ABC, abstractmethod

from booking_manager.domain.entities.booking import BookingsState


class BookingStoragePort(ABC):
    @abstractmethod
    def load(self) -> BookingsState | None:
        """Load the persisted snapshot. Returns None if absent or unreadable."""
        raise NotImplementedError

    @abstractmethod
    def save(self, state: BookingsState) -> None:
        """Persist a full snapshot of the collection."""
        raise NotImplementedError
