"""
Logging setup: one stream handler on the root logger whose formatter appends
booking context passed through `extra=` as key=value pairs.
"""

import logging
import sys

from booking_manager.core.config import settings

CONTEXT_FIELDS = ("booking_id", "guest_name", "error_kind", "path", "reason")


class ContextFormatter(logging.Formatter):
    def __init__(self, fmt: str | None = None, fields: tuple[str, ...] = CONTEXT_FIELDS) -> None:
        super().__init__(fmt)
        self._fields = fields

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = " ".join(
            f"{key}={getattr(record, key)}"
            for key in self._fields
            if getattr(record, key, None) not in (None, "")
        )
        return f"{base} | {context}" if context else base


def setup_logging(level: str | None = None) -> None:
    # Timestamps only outside dev; uvicorn already stamps its own lines locally
    if settings.ENV.lower() in {"dev", "local"}:
        fmt = "%(levelname)s:%(name)s:%(message)s"
    else:
        fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(fmt))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO))

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
