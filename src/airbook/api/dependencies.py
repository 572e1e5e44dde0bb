"""Shared helpers for route handlers."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from ..services.booking import (
    BookingError,
    CapacityFullError,
    CrewMissingError,
    PassengerNotFoundError,
    UnknownAirportError,
)
from ..services.session import AirlineSession

_STATUS_BY_ERROR: dict[type[BookingError], int] = {
    UnknownAirportError: status.HTTP_404_NOT_FOUND,
    PassengerNotFoundError: status.HTTP_404_NOT_FOUND,
    CrewMissingError: status.HTTP_409_CONFLICT,
    CapacityFullError: status.HTTP_409_CONFLICT,
}


def get_session(request: Request) -> AirlineSession:
    return request.app.state.session


def booking_http_error(exc: BookingError) -> HTTPException:
    status_code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_422_UNPROCESSABLE_ENTITY)
    return HTTPException(status_code=status_code, detail={"code": exc.code, "message": exc.message})
