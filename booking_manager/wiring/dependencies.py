import logging
import threading

from booking_manager.application.ports.booking_storage import BookingStoragePort
from booking_manager.application.use_cases.booking_store import BookingStore, demo_state, empty_state
from booking_manager.core.config import settings
from booking_manager.infrastructure.store.json_storage import JsonBookingStorage
from booking_manager.infrastructure.store.memory_storage import MemoryBookingStorage


_booking_store: BookingStore | None = None
_booking_store_lock = threading.Lock()


def get_booking_storage() -> BookingStoragePort:
    provider = (settings.BOOKINGS_STORE_PROVIDER or "").lower()
    if not provider:
        provider = "json" if settings.ENV.lower() in {"dev", "local"} else "memory"

    if provider == "json":
        return JsonBookingStorage(path=settings.BOOKINGS_STORAGE_PATH)
    if provider == "memory":
        return MemoryBookingStorage()
    raise ValueError(f"Unknown BOOKINGS_STORE_PROVIDER: {settings.BOOKINGS_STORE_PROVIDER}")


def get_booking_store() -> BookingStore:
    global _booking_store
    with _booking_store_lock:
        if _booking_store is None:
            logger = logging.getLogger(__name__)
            storage = get_booking_storage()
            logger.info("Using booking storage %s", type(storage).__name__)
            _booking_store = BookingStore(
                storage=storage,
                seed=demo_state if settings.BOOKINGS_SEED_DEMO else empty_state,
            )
    return _booking_store
