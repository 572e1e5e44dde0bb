"""Plain-text rendering of airports, people and tickets."""

from __future__ import annotations

from typing import Iterable, Sequence

from ...models.domain import Airport, Person, Ticket, role_label


def format_airports(airports: Sequence[Airport]) -> str:
    lines = ["--- Airports ---"]
    lines.extend(f"{airport.code} - {airport.name}" for airport in airports)
    return "\n".join(lines)


def format_person(person: Person) -> str:
    return f"#{person.person_id} - {person.name} ({role_label(person.role)})"


def format_people(people: Sequence[Person]) -> str:
    lines = ["--- Passengers/Crew ---"]
    lines.extend(format_person(person) for person in people)
    lines.append(f"Total onboard: {len(people)}")
    return "\n".join(lines)


def format_ticket(ticket: Ticket) -> str:
    passenger = ticket.passenger
    validity = f"{ticket.validity_years}{'' if ticket.is_valid() else ' (Expired)'}"
    return "\n".join(
        [
            "----- Ticket -----",
            f"Ticket ID       : {ticket.ticket_id}",
            f"Passenger       : {passenger.name} ({role_label(passenger.role)})",
            f"Route           : {ticket.origin_code} -> {ticket.destination_code}",
            f"Return Ticket   : {'Yes' if ticket.is_return else 'No'}",
            f"Days to Travel  : {ticket.lead_days}",
            f"Validity (years): {validity}",
            f"Price           : {ticket.price:.2f}",
        ]
    )


def format_tickets(tickets: Iterable[Ticket]) -> str:
    blocks = [format_ticket(ticket) for ticket in tickets]
    if not blocks:
        return "No tickets booked."
    return "\n\n".join(blocks) + f"\nTotal Tickets: {len(blocks)}"
