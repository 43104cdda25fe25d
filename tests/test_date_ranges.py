"""
Tests for half-open date range validation and overlap detection.
"""

from __future__ import annotations

from datetime import date, datetime

import pytest

from booking_manager.application.utils.date_ranges import (
    does_overlap,
    is_date_range_valid,
    parse_iso_date,
    to_iso_date,
)


def test_range_valid_only_when_end_after_start():
    assert is_date_range_valid("2026-01-01", "2026-01-02") is True
    assert is_date_range_valid("2026-01-01", "2026-01-01") is False
    assert is_date_range_valid("2026-01-02", "2026-01-01") is False


def test_range_validity_accepts_date_objects():
    assert is_date_range_valid(date(2026, 1, 31), date(2026, 2, 1)) is True
    assert is_date_range_valid(date(2026, 2, 1), "2026-01-31") is False


def test_unparseable_range_is_invalid():
    assert is_date_range_valid("not-a-date", "2026-01-02") is False
    assert is_date_range_valid("2026-01-01", "") is False
    assert is_date_range_valid("2026-02-30", "2026-03-01") is False


def test_overlap_partial():
    assert does_overlap("2026-01-01", "2026-01-03", "2026-01-02", "2026-01-04") is True


def test_overlap_identical_ranges():
    assert does_overlap("2026-01-01", "2026-01-03", "2026-01-01", "2026-01-03") is True


def test_overlap_when_start_inside_other():
    assert does_overlap("2026-01-01", "2026-01-10", "2026-01-05", "2026-01-12") is True


def test_overlap_when_end_inside_other():
    assert does_overlap("2026-01-05", "2026-01-12", "2026-01-01", "2026-01-10") is True


def test_overlap_when_contained():
    assert does_overlap("2026-01-01", "2026-01-10", "2026-01-03", "2026-01-05") is True


def test_touching_boundary_does_not_overlap():
    assert does_overlap("2026-01-01", "2026-01-03", "2026-01-03", "2026-01-05") is False
    assert does_overlap("2026-01-05", "2026-01-07", "2026-01-01", "2026-01-05") is False


def test_disjoint_ranges_do_not_overlap_in_either_order():
    assert does_overlap("2026-01-01", "2026-01-03", "2026-01-04", "2026-01-06") is False
    assert does_overlap("2026-01-05", "2026-01-07", "2026-01-01", "2026-01-04") is False


def test_overlap_is_symmetric():
    ranges = [
        ("2026-01-01", "2026-01-03"),
        ("2026-01-02", "2026-01-04"),
        ("2026-01-03", "2026-01-05"),
        ("2026-01-01", "2026-01-10"),
        ("2026-01-10", "2026-01-11"),
    ]
    for a_start, a_end in ranges:
        for b_start, b_end in ranges:
            assert does_overlap(a_start, a_end, b_start, b_end) == does_overlap(b_start, b_end, a_start, a_end)


def test_overlap_compares_calendar_dates_across_month_boundary():
    assert does_overlap("2026-01-30", "2026-02-02", "2026-02-01", "2026-02-05") is True
    assert does_overlap(date(2025, 12, 30), date(2026, 1, 1), "2026-01-01", "2026-01-03") is False


def test_parse_iso_date_drops_time_of_day():
    assert parse_iso_date(datetime(2026, 3, 1, 23, 59)) == date(2026, 3, 1)
    assert to_iso_date(date(2026, 3, 1)) == "2026-03-01"
    assert to_iso_date(" 2026-03-01 ") == "2026-03-01"


def test_parse_iso_date_rejects_other_types():
    with pytest.raises(ValueError):
        parse_iso_date(20260301)  # type: ignore[arg-type]
