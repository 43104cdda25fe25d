#!/usr/bin/env python3
"""
Interactive local booking harness (no HTTP).

Usage:
  python3 scripts/bookings_local.py

Runs the same BookingStore the API uses (see booking_manager.wiring) and
prints the table and the last validation error after every command.
"""

from __future__ import annotations

import shlex
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from booking_manager.application.use_cases.booking_store import BookingStore
from booking_manager.domain.entities.booking import Booking, BookingInput
from booking_manager.wiring.dependencies import get_booking_store

HELP = """Commands:
  /list [query]                               -> show bookings, optionally filtered
  /show <id>                                  -> show one booking
  /add <guest> <start> <end> [notes]          -> create a booking (dates as YYYY-MM-DD)
  /edit <id> <guest> <start> <end> [notes]    -> update a booking
  /del <id>                                   -> delete a booking
  /quit                                       -> exit
Quote names with spaces: /add "Jane Doe" 2026-02-01 2026-02-03"""


def _print_header() -> None:
    print("\nLocal Booking Harness")
    print("-" * 60)
    print(HELP)
    print("-" * 60)


def _format_row(booking: Booking) -> str:
    notes = f"  ({booking.notes})" if booking.notes else ""
    return f"{booking.id:<34} {booking.start_date} -> {booking.end_date}  {booking.guest_name}{notes}"


def _print_bookings(bookings: list[Booking]) -> None:
    if not bookings:
        print("(no bookings)")
        return
    for booking in bookings:
        print(_format_row(booking))


def _report(store: BookingStore) -> None:
    if store.last_error is not None:
        print(f"ERROR [{store.last_error.kind.value}]: {store.last_error.message}")
    else:
        print("OK")


def _parse_input(args: list[str]) -> BookingInput | None:
    if len(args) < 3:
        return None
    guest, start, end, *rest = args
    return BookingInput(
        guest_name=guest,
        start_date=start,
        end_date=end,
        notes=" ".join(rest) or None,
    )


def handle_command(store: BookingStore, line: str) -> bool:
    """Run one command line. Returns False when the loop should stop."""
    try:
        parts = shlex.split(line)
    except ValueError as e:
        print(f"Could not parse command: {e}")
        return True
    if not parts:
        return True

    cmd, args = parts[0].lower(), parts[1:]
    if cmd in ("/quit", "/exit"):
        return False
    if cmd == "/help":
        print(HELP)
    elif cmd == "/list":
        _print_bookings(store.search(" ".join(args)))
    elif cmd == "/show" and len(args) == 1:
        booking = store.get_booking(args[0])
        print(_format_row(booking) if booking else "Booking not found")
    elif cmd == "/add":
        booking_input = _parse_input(args)
        if booking_input is None:
            print("Usage: /add <guest> <start> <end> [notes]")
            return True
        store.clear_error()
        store.create(booking_input)
        _report(store)
    elif cmd == "/edit" and args:
        booking_input = _parse_input(args[1:])
        if booking_input is None:
            print("Usage: /edit <id> <guest> <start> <end> [notes]")
            return True
        if store.get_booking(args[0]) is None:
            print("Booking not found")
            return True
        store.clear_error()
        store.update(args[0], booking_input)
        _report(store)
    elif cmd == "/del" and len(args) == 1:
        store.delete(args[0])
        _report(store)
    else:
        print("Unknown command, type /help")
    return True


def main() -> None:
    store = get_booking_store()
    _print_header()
    _print_bookings(list(store.items))

    while True:
        try:
            line = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not handle_command(store, line):
            print("Bye!")
            return


if __name__ == "__main__":
    main()
