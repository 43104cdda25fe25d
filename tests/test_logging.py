"""
Tests for the context-aware log formatter.
"""

from __future__ import annotations

import logging

from booking_manager.core.logging import ContextFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("booking_manager.test", logging.INFO, __file__, 1, "Booking rejected", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_context_fields():
    formatter = ContextFormatter("%(levelname)s:%(message)s")

    line = formatter.format(_record(booking_id="b1", error_kind="OVERLAP", guest_name=None))

    assert line == "INFO:Booking rejected | booking_id=b1 error_kind=OVERLAP"


def test_formatter_without_context_is_plain():
    formatter = ContextFormatter("%(message)s")

    assert formatter.format(_record(unrelated="x")) == "Booking rejected"


def test_setup_logging_installs_single_handler():
    setup_logging("warning")
    setup_logging("debug")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ContextFormatter)
    assert root.level == logging.DEBUG
