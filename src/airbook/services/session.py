"""Process-wide booking session shared by the CLI and the API."""

from __future__ import annotations

import logging
from typing import Iterator

from ..config import Settings, settings as default_settings
from ..data.airport_repository import AirportCatalog
from ..models.domain import Airport, Person, Ticket
from .booking import BookingEngine, BookingRules
from .fares import FareCalculator, FareQuote, FareRules
from .ledger import TicketLedger
from .roster import Roster, RosterSummary

DEFAULT_PILOT = ("Capt. Sharma", 15)
DEFAULT_ATTENDANT = ("Anita", "IndiGo")


class AirlineSession:
    """Single owner of the catalog, roster and ledger. Not thread-safe."""

    def __init__(
        self,
        *,
        catalog: AirportCatalog | None = None,
        fare_rules: FareRules | None = None,
        booking_rules: BookingRules | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else AirportCatalog()
        self.roster = Roster()
        self.ledger = TicketLedger()
        self.engine = BookingEngine(
            self.catalog,
            self.roster,
            self.ledger,
            calculator=FareCalculator(fare_rules),
            rules=booking_rules,
        )

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "AirlineSession":
        config = config or default_settings
        session = cls(
            fare_rules=FareRules.from_settings(config),
            booking_rules=BookingRules.from_settings(config),
        )
        if config.seed_crew:
            session.seed_default_crew()
        return session

    def seed_default_crew(self) -> tuple[Person, Person]:
        pilot = self.roster.add_pilot(*DEFAULT_PILOT)
        attendant = self.roster.add_attendant(*DEFAULT_ATTENDANT)
        logging.info("Seeded default crew")
        return pilot, attendant

    def list_airports(self) -> list[Airport]:
        return self.catalog.list_airports()

    def get_airport(self, code: str) -> Airport | None:
        return self.catalog.get_airport(code)

    def add_traveler(self, name: str) -> Person:
        return self.roster.add_traveler(name)

    def add_pilot(self, name: str, years_experience: int) -> Person:
        return self.roster.add_pilot(name, years_experience)

    def add_attendant(self, name: str, airline: str) -> Person:
        return self.roster.add_attendant(name, airline)

    def find_person_by_id(self, person_id: int) -> Person | None:
        return self.roster.find_person(person_id)

    def list_people(self) -> list[Person]:
        return self.roster.list_people()

    def roster_summary(self) -> RosterSummary:
        return self.roster.summary()

    def quote_fare(self, origin_code: str, destination_code: str, is_return: bool, lead_days: int) -> FareQuote:
        return self.engine.quote(origin_code, destination_code, is_return, lead_days)

    def book_ticket(
        self,
        origin_code: str,
        destination_code: str,
        passenger_id: int,
        is_return: bool,
        lead_days: int,
    ) -> Ticket:
        return self.engine.book_ticket(origin_code, destination_code, passenger_id, is_return, lead_days)

    def list_tickets(self) -> Iterator[Ticket]:
        return self.ledger.list_tickets()

    def age_all_tickets(self, years: int) -> None:
        self.ledger.age_all(years)
