"""Booking failure taxonomy."""

from __future__ import annotations


class BookingError(ValueError):
    """Base class for rejected bookings. ``code`` is stable for API clients."""

    code = "BookingError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnknownAirportError(BookingError):
    code = "UnknownAirport"


class SameAirportError(BookingError):
    code = "SameAirport"


class CrewMissingError(BookingError):
    code = "CrewMissing"


class CapacityFullError(BookingError):
    code = "CapacityFull"


class PassengerNotFoundError(BookingError):
    code = "PassengerNotFound"


class InvalidPassengerRoleError(BookingError):
    code = "InvalidPassengerRole"
