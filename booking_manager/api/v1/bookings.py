from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from booking_manager.api.v1.schemas import (
    BookingInputSchema,
    BookingListResponseSchema,
    BookingSchema,
    ValidationErrorSchema,
)
from booking_manager.application.use_cases.booking_store import BookingStore
from booking_manager.domain.entities.booking import BookingValidationError, ValidationErrorKind
from booking_manager.wiring.dependencies import get_booking_store

router = APIRouter()
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ValidationErrorKind.INVALID_DATES: 422,
    ValidationErrorKind.OVERLAP: 409,
}


def _raise_for_error(error: BookingValidationError) -> None:
    raise HTTPException(
        status_code=ERROR_STATUS[error.kind],
        detail={"kind": error.kind.value, "message": error.message},
    )


@router.get("/bookings", response_model=BookingListResponseSchema)
def list_bookings(
    q: str | None = Query(None, description="Search over guest name, notes and dates"),
    store: BookingStore = Depends(get_booking_store),
):
    return BookingListResponseSchema(
        items=[BookingSchema.from_entity(b) for b in store.search(q)],
        last_error=ValidationErrorSchema.from_entity(store.last_error),
    )


@router.get("/bookings/errors/last", response_model=ValidationErrorSchema | None)
def get_last_error(store: BookingStore = Depends(get_booking_store)):
    return ValidationErrorSchema.from_entity(store.last_error)


@router.delete("/bookings/errors/last", status_code=204)
def clear_last_error(store: BookingStore = Depends(get_booking_store)) -> Response:
    store.clear_error()
    return Response(status_code=204)


@router.get("/bookings/{booking_id}", response_model=BookingSchema)
def get_booking(booking_id: str, store: BookingStore = Depends(get_booking_store)):
    booking = store.get_booking(booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return BookingSchema.from_entity(booking)


@router.post("/bookings", response_model=BookingSchema, status_code=201)
def create_booking(req: BookingInputSchema, store: BookingStore = Depends(get_booking_store)):
    with store.lock:
        booking = store.create(req.to_input())
        error = store.last_error
    if booking is None:
        _raise_for_error(error)
    return BookingSchema.from_entity(booking)


@router.put("/bookings/{booking_id}", response_model=BookingSchema)
def update_booking(
    booking_id: str,
    req: BookingInputSchema,
    store: BookingStore = Depends(get_booking_store),
):
    with store.lock:
        if store.get_booking(booking_id) is None:
            raise HTTPException(status_code=404, detail="Booking not found")
        booking = store.update(booking_id, req.to_input())
        error = store.last_error
    if booking is None:
        _raise_for_error(error)
    return BookingSchema.from_entity(booking)


@router.delete("/bookings/{booking_id}", status_code=204)
def delete_booking(booking_id: str, store: BookingStore = Depends(get_booking_store)) -> Response:
    store.delete(booking_id)
    return Response(status_code=204)
