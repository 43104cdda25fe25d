from __future__ import annotations

from datetime import date
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints, field_validator

from booking_manager.domain.entities.booking import (
    Booking,
    BookingInput,
    BookingValidationError,
    ValidationErrorKind,
)


class BookingInputSchema(BaseModel):
    guest_name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=2)]
    start_date: date
    end_date: date
    notes: str | None = None

    @field_validator("notes")
    @classmethod
    def strip_notes(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    def to_input(self) -> BookingInput:
        return BookingInput(
            guest_name=self.guest_name,
            start_date=self.start_date,
            end_date=self.end_date,
            notes=self.notes,
        )


class BookingSchema(BaseModel):
    id: str
    guest_name: str
    start_date: str
    end_date: str
    notes: str | None = None
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingSchema":
        return cls(
            id=booking.id,
            guest_name=booking.guest_name,
            start_date=booking.start_date,
            end_date=booking.end_date,
            notes=booking.notes,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )


class ValidationErrorSchema(BaseModel):
    kind: ValidationErrorKind
    message: str

    @classmethod
    def from_entity(cls, error: BookingValidationError | None) -> "ValidationErrorSchema | None":
        if error is None:
            return None
        return cls(kind=error.kind, message=error.message)


class BookingListResponseSchema(BaseModel):
    items: list[BookingSchema] = Field(default_factory=list)
    last_error: ValidationErrorSchema | None = None
