"""Pydantic request/response models for fare and ticket endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ..models.domain import Ticket
from ..services.fares import FareQuote
from .people import PersonModel


class RouteRequest(BaseModel):
    origin: str = Field(..., description="Origin airport code, e.g. DEL.")
    destination: str = Field(..., description="Destination airport code, e.g. BOM.")
    is_return: bool = Field(default=False, description="Price as a return ticket.")
    lead_days: int = Field(..., description="Days between booking and travel; negative counts as short notice.")

    @field_validator("origin", "destination")
    @classmethod
    def normalize_code(cls, value: str) -> str:
        return value.strip().upper()


class FareQuoteRequest(RouteRequest):
    pass


class BookingRequest(RouteRequest):
    passenger_id: int = Field(..., description="Roster id of a registered passenger.")


class FareQuoteResponse(BaseModel):
    origin: str
    destination: str
    distance: float
    base_fare: float
    lead_time_multiplier: float
    return_multiplier: float
    total: float

    @classmethod
    def from_domain(cls, origin: str, destination: str, quote: FareQuote) -> "FareQuoteResponse":
        return cls(
            origin=origin,
            destination=destination,
            distance=quote.distance,
            base_fare=quote.base_fare,
            lead_time_multiplier=quote.lead_time_multiplier,
            return_multiplier=quote.return_multiplier,
            total=round(quote.total, 2),
        )


class TicketModel(BaseModel):
    id: int
    passenger: PersonModel
    origin: str
    destination: str
    is_return: bool
    lead_days: int
    validity_years: int
    is_valid: bool
    price: float

    @classmethod
    def from_domain(cls, ticket: Ticket) -> "TicketModel":
        return cls(
            id=ticket.ticket_id,
            passenger=PersonModel.from_domain(ticket.passenger),
            origin=ticket.origin_code,
            destination=ticket.destination_code,
            is_return=ticket.is_return,
            lead_days=ticket.lead_days,
            validity_years=ticket.validity_years,
            is_valid=ticket.is_valid(),
            price=round(ticket.price, 2),
        )


class AgeTicketsRequest(BaseModel):
    years: int = Field(..., description="Years of simulated time to subtract from every ticket's validity.")


class AgeTicketsResponse(BaseModel):
    years: int
    tickets: int
    expired: int
