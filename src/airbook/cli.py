#!/usr/bin/env python3
"""Command line entry point: interactive booking menu or the HTTP API."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional

from .config import settings
from .logging_config import setup_logging
from .services.booking import BookingError
from .services.outputs.formatter import format_airports, format_people, format_tickets
from .services.session import AirlineSession

Reader = Callable[[str], str]
Writer = Callable[[str], None]

MENU = (
    "\n=== Airline Booking System ===\n"
    "1. List Airports\n2. Add Passenger\n3. Add Pilot\n4. Add Flight Attendant\n"
    "5. List Passengers/Crew\n6. Book Ticket\n7. List Tickets\n8. Simulate Time\n0. Exit"
)


def _prompt_int(read: Reader, prompt: str) -> int:
    while True:
        raw = read(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            continue


def _book(session: AirlineSession, read: Reader, write: Writer) -> None:
    origin = read("Source code: ").strip().upper()
    destination = read("Destination code: ").strip().upper()
    passenger_id = _prompt_int(read, "Passenger ID: ")
    is_return = read("Return ticket (y/n): ").strip().lower().startswith("y")
    lead_days = _prompt_int(read, "Days until travel: ")
    try:
        ticket = session.book_ticket(origin, destination, passenger_id, is_return, lead_days)
    except BookingError as exc:
        write(exc.message)
        return
    write(f"Ticket booked for {ticket.passenger.name}.")


def run_menu(session: AirlineSession, read: Reader = input, write: Writer = print) -> int:
    """Run the interactive menu until the user picks 0 or input ends."""
    while True:
        write(MENU)
        try:
            raw = read("Choice: ").strip()
            try:
                choice = int(raw)
            except ValueError:
                continue

            if choice == 0:
                break

            match choice:
                case 1:
                    write(format_airports(session.list_airports()))
                case 2:
                    person = session.add_traveler(read("Passenger name: ").strip())
                    write(f"Added Passenger #{person.person_id} - {person.name}")
                case 3:
                    name = read("Pilot name: ").strip()
                    years = _prompt_int(read, "Years experience: ")
                    person = session.add_pilot(name, years)
                    write(f"Added Pilot #{person.person_id} - {person.name}")
                case 4:
                    name = read("Attendant name: ").strip()
                    airline = read("Airline: ").strip()
                    person = session.add_attendant(name, airline)
                    write(f"Added Flight Attendant #{person.person_id} - {person.name}")
                case 5:
                    write(format_people(session.list_people()))
                    write("Crew OK." if session.roster_summary().crew_ok else "Crew missing!")
                case 6:
                    _book(session, read, write)
                case 7:
                    write(format_tickets(session.list_tickets()))
                case 8:
                    years = _prompt_int(read, "Years to simulate: ")
                    session.age_all_tickets(years)
                    write(f"{years} year(s) passed. Ticket validity updated.")
                case _:
                    write("Invalid choice.")
        except EOFError:
            break

    write("Goodbye!")
    return 0


def cmd_menu(args: argparse.Namespace) -> int:
    return run_menu(AirlineSession.from_settings(settings))


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "airbook.main:create_app",
        factory=True,
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_level=(args.log_level or settings.log_level).lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="airbook", description="In-memory airline booking simulator")
    parser.add_argument("--log-level", default=None, help=f"Logging level (default: {settings.log_level})")
    sub = parser.add_subparsers(dest="cmd")

    p_menu = sub.add_parser("menu", help="Interactive booking menu (default)")
    p_menu.set_defaults(func=cmd_menu)

    p_serve = sub.add_parser("serve", help="Serve the booking API with uvicorn")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    p_serve.set_defaults(func=cmd_serve)

    parser.set_defaults(func=cmd_menu)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level or settings.log_level)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
