"""
Booking Manager API entry point.

Run locally with: uvicorn booking_manager.main:app --reload
"""

from fastapi import FastAPI

from booking_manager.api.v1.bookings import router as bookings_router
from booking_manager.core.logging import setup_logging

setup_logging()

app = FastAPI(title="Booking Manager", version="1.0.0")
app.include_router(bookings_router, prefix="/api/v1", tags=["bookings"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
