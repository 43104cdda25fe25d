from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from booking_manager.application.ports.booking_storage import BookingStoragePort
from booking_manager.application.utils.date_ranges import to_iso_date
from booking_manager.domain.entities.booking import (
    Booking,
    BookingsState,
    BookingValidationError,
    ValidationErrorKind,
)


class JsonBookingStorage(BookingStoragePort):
    def __init__(self, path: str = "./data/bookings.v1.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._logger = logging.getLogger(__name__)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> BookingsState | None:
        """Load the snapshot, return None if the file is missing or malformed."""
        if not self._path.exists():
            return None

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return self._deserialize_state(data)
        except (json.JSONDecodeError, OSError, KeyError, TypeError, ValueError) as e:
            self._logger.warning(
                "Bookings file is unreadable", extra={"path": str(self._path), "reason": str(e)}
            )
            return None

    def save(self, state: BookingsState) -> None:
        """Write the snapshot to a temp file and rename it over the slot."""
        temp_path = self._path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(self._serialize_state(state), f, indent=2, ensure_ascii=False)
            temp_path.replace(self._path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def _serialize_state(self, state: BookingsState) -> dict[str, Any]:
        return {
            "items": [self._serialize_booking(b) for b in state.items],
            "lastError": self._serialize_error(state.last_error),
        }

    def _serialize_booking(self, booking: Booking) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": booking.id,
            "guestName": booking.guest_name,
            "startDate": booking.start_date,
            "endDate": booking.end_date,
            "createdAt": booking.created_at,
            "updatedAt": booking.updated_at,
        }
        if booking.notes is not None:
            result["notes"] = booking.notes
        return result

    def _serialize_error(self, error: BookingValidationError | None) -> dict[str, str] | None:
        if error is None:
            return None
        return {"type": error.kind.value, "message": error.message}

    def _deserialize_state(self, data: Any) -> BookingsState:
        if not isinstance(data, dict) or not isinstance(data["items"], list):
            raise TypeError("Expected an object with an 'items' list")

        items = tuple(self._deserialize_booking(item) for item in data["items"])
        return BookingsState(items=items, last_error=self._deserialize_error(data.get("lastError")))

    def _deserialize_booking(self, data: Any) -> Booking:
        if not isinstance(data, dict):
            raise TypeError("Booking entry must be an object")

        start_date = _require_str(data, "startDate")
        end_date = _require_str(data, "endDate")

        notes = data.get("notes")
        if notes is not None and not isinstance(notes, str):
            raise TypeError("notes must be a string")

        return Booking(
            id=_require_str(data, "id"),
            guest_name=_require_str(data, "guestName"),
            start_date=to_iso_date(start_date),
            end_date=to_iso_date(end_date),
            notes=notes,
            created_at=_require_str(data, "createdAt"),
            updated_at=_require_str(data, "updatedAt"),
        )

    def _deserialize_error(self, data: Any) -> BookingValidationError | None:
        if data is None:
            return None
        if not isinstance(data, dict):
            raise TypeError("lastError must be an object or null")
        return BookingValidationError(
            kind=ValidationErrorKind(data["type"]),
            message=_require_str(data, "message"),
        )


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value
