"""Domain models for airports, people and tickets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Airport:
    """A named location on the simulator's flat map."""

    code: str
    name: str
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Traveler:
    """Role of a person who may hold tickets."""


@dataclass(frozen=True, slots=True)
class Pilot:
    years_experience: int


@dataclass(frozen=True, slots=True)
class Attendant:
    airline: str


Role = Traveler | Pilot | Attendant


def role_kind(role: Role) -> str:
    """Return the machine-readable tag of a role."""

    match role:
        case Traveler():
            return "traveler"
        case Pilot():
            return "pilot"
        case Attendant():
            return "attendant"
    raise TypeError(f"Unsupported role: {role!r}")


def role_label(role: Role) -> str:
    """Return the display label of a role."""

    match role:
        case Traveler():
            return "Passenger"
        case Pilot():
            return "Pilot"
        case Attendant():
            return "Flight Attendant"
    raise TypeError(f"Unsupported role: {role!r}")


@dataclass(frozen=True, slots=True)
class Person:
    """A registered traveler or crew member. The role never changes."""

    person_id: int
    name: str
    role: Role

    @property
    def is_traveler(self) -> bool:
        return isinstance(self.role, Traveler)


@dataclass(slots=True)
class Ticket:
    """An issued ticket.

    ``passenger`` points at a person owned by the roster; the roster never drops
    people, so the reference stays valid for the whole session. ``price`` is set
    once at booking time and only ``validity_years`` changes afterwards.
    """

    ticket_id: int
    origin_code: str
    destination_code: str
    passenger: Person
    is_return: bool
    lead_days: int
    validity_years: int
    price: float

    def __setattr__(self, name: str, value: object) -> None:
        if name == "price" and hasattr(self, "price"):
            raise AttributeError("Ticket price is fixed once the ticket is issued.")
        object.__setattr__(self, name, value)

    def is_valid(self) -> bool:
        return self.validity_years > 0

    def age(self, years: int) -> None:
        self.validity_years -= years
