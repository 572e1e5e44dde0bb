"""Registry of travelers and crew members."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Iterator

from ..models.domain import Attendant, Person, Pilot, Role, Traveler


@dataclass(slots=True)
class RosterSummary:
    total: int
    travelers: int
    pilots: int
    attendants: int

    @property
    def crew_ok(self) -> bool:
        return self.pilots > 0 and self.attendants > 0


class Roster:
    """Append-only list of people with monotonically assigned ids."""

    def __init__(self) -> None:
        self._people: list[Person] = []
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people)

    def _register(self, name: str, role: Role) -> Person:
        person = Person(person_id=next(self._ids), name=name, role=role)
        self._people.append(person)
        logging.info(f"Registered #{person.person_id} {person.name} as {type(role).__name__}")
        return person

    def add_traveler(self, name: str) -> Person:
        return self._register(name, Traveler())

    def add_pilot(self, name: str, years_experience: int) -> Person:
        return self._register(name, Pilot(years_experience=years_experience))

    def add_attendant(self, name: str, airline: str) -> Person:
        return self._register(name, Attendant(airline=airline))

    def find_person(self, person_id: int) -> Person | None:
        for person in self._people:
            if person.person_id == person_id:
                return person
        return None

    def list_people(self) -> list[Person]:
        return list(self._people)

    def has_pilot_and_attendant(self) -> bool:
        pilot = attendant = False
        for person in self._people:
            match person.role:
                case Pilot():
                    pilot = True
                case Attendant():
                    attendant = True
        return pilot and attendant

    def traveler_count(self) -> int:
        return sum(1 for person in self._people if isinstance(person.role, Traveler))

    def summary(self) -> RosterSummary:
        counts = {"traveler": 0, "pilot": 0, "attendant": 0}
        for person in self._people:
            match person.role:
                case Traveler():
                    counts["traveler"] += 1
                case Pilot():
                    counts["pilot"] += 1
                case Attendant():
                    counts["attendant"] += 1
        return RosterSummary(
            total=len(self._people),
            travelers=counts["traveler"],
            pilots=counts["pilot"],
            attendants=counts["attendant"],
        )
