"""Booking engine and its error types."""

from .engine import BookingEngine, BookingRules
from .errors import (
    BookingError,
    CapacityFullError,
    CrewMissingError,
    InvalidPassengerRoleError,
    PassengerNotFoundError,
    SameAirportError,
    UnknownAirportError,
)

__all__ = [
    "BookingEngine",
    "BookingRules",
    "BookingError",
    "UnknownAirportError",
    "SameAirportError",
    "CrewMissingError",
    "CapacityFullError",
    "PassengerNotFoundError",
    "InvalidPassengerRoleError",
]
