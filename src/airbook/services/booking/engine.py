"""Booking eligibility checks and ticket construction."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ...config import Settings, settings as default_settings
from ...data.airport_repository import AirportCatalog
from ...models.domain import Airport, Person, Ticket, role_label
from ..fares import FareCalculator, FareQuote
from ..geospatial import airport_distance
from ..ledger import TicketLedger
from ..roster import Roster
from .errors import (
    BookingError,
    CapacityFullError,
    CrewMissingError,
    InvalidPassengerRoleError,
    PassengerNotFoundError,
    SameAirportError,
    UnknownAirportError,
)


@dataclass(frozen=True, slots=True)
class BookingRules:
    max_passengers: int = 180
    ticket_validity_years: int = 1

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "BookingRules":
        config = config or default_settings
        return cls(
            max_passengers=config.max_passengers,
            ticket_validity_years=config.ticket_validity_years,
        )


class BookingEngine:
    """Validates booking requests against the catalog and roster, then issues tickets.

    Checks run in a fixed order and stop at the first failure. Nothing is
    allocated or recorded until every check has passed.
    """

    def __init__(
        self,
        catalog: AirportCatalog,
        roster: Roster,
        ledger: TicketLedger,
        *,
        calculator: FareCalculator | None = None,
        rules: BookingRules | None = None,
    ) -> None:
        self.catalog = catalog
        self.roster = roster
        self.ledger = ledger
        self.calculator = calculator or FareCalculator()
        self.rules = rules or BookingRules()

    def _resolve_route(self, origin_code: str, destination_code: str) -> tuple[Airport, Airport]:
        unknown = [code for code in (origin_code, destination_code) if code not in self.catalog]
        if unknown:
            raise UnknownAirportError(f"Invalid airport code(s): {', '.join(unknown)}.")
        return self.catalog.get_airport(origin_code), self.catalog.get_airport(destination_code)

    def _check_flight(self) -> None:
        if not self.roster.has_pilot_and_attendant():
            raise CrewMissingError("Crew missing! At least one pilot and one flight attendant are required.")
        if self.roster.traveler_count() >= self.rules.max_passengers:
            raise CapacityFullError(f"Flight full! Capacity of {self.rules.max_passengers} passengers reached.")

    def _resolve_passenger(self, passenger_id: int) -> Person:
        passenger = self.roster.find_person(passenger_id)
        if passenger is None:
            raise PassengerNotFoundError(f"Passenger #{passenger_id} not found.")
        if not passenger.is_traveler:
            raise InvalidPassengerRoleError(
                f"Only passengers can book tickets; #{passenger_id} is a {role_label(passenger.role)}."
            )
        return passenger

    def quote(self, origin_code: str, destination_code: str, is_return: bool, lead_days: int) -> FareQuote:
        origin, destination = self._resolve_route(origin_code, destination_code)
        if origin.code == destination.code:
            raise SameAirportError("Source and destination cannot be the same.")
        return self.calculator.quote(airport_distance(origin, destination), lead_days, is_return)

    def book_ticket(
        self,
        origin_code: str,
        destination_code: str,
        passenger_id: int,
        is_return: bool,
        lead_days: int,
    ) -> Ticket:
        try:
            origin, destination = self._resolve_route(origin_code, destination_code)
            if origin.code == destination.code:
                raise SameAirportError("Source and destination cannot be the same.")
            self._check_flight()
            passenger = self._resolve_passenger(passenger_id)
        except BookingError as exc:
            logging.info(f"Booking rejected ({exc.code}): {exc.message}")
            raise

        price = self.calculator.compute_fare(airport_distance(origin, destination), lead_days, is_return)
        ticket = Ticket(
            ticket_id=self.ledger.allocate_id(),
            origin_code=origin.code,
            destination_code=destination.code,
            passenger=passenger,
            is_return=is_return,
            lead_days=lead_days,
            validity_years=self.rules.ticket_validity_years,
            price=price,
        )
        self.ledger.record_ticket(ticket)
        logging.info(
            f"Ticket #{ticket.ticket_id} booked for {passenger.name}: "
            f"{ticket.origin_code} -> {ticket.destination_code} at {ticket.price:.2f}"
        )
        return ticket
