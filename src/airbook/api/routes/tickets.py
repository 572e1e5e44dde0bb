"""Fare quote and ticket booking endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from ...schemas.tickets import (
    AgeTicketsRequest,
    AgeTicketsResponse,
    BookingRequest,
    FareQuoteRequest,
    FareQuoteResponse,
    TicketModel,
)
from ...services.booking import BookingError
from ...services.session import AirlineSession
from ..dependencies import booking_http_error, get_session

router = APIRouter(tags=["tickets"])


@router.post("/fares/quote", response_model=FareQuoteResponse, status_code=status.HTTP_200_OK)
async def quote_fare(payload: FareQuoteRequest, session: AirlineSession = Depends(get_session)) -> FareQuoteResponse:
    try:
        quote = session.quote_fare(payload.origin, payload.destination, payload.is_return, payload.lead_days)
    except BookingError as exc:
        raise booking_http_error(exc) from exc
    return FareQuoteResponse.from_domain(payload.origin, payload.destination, quote)


@router.get("/tickets", response_model=List[TicketModel], status_code=status.HTTP_200_OK)
async def list_tickets(session: AirlineSession = Depends(get_session)) -> List[TicketModel]:
    return [TicketModel.from_domain(ticket) for ticket in session.list_tickets()]


@router.post("/tickets", response_model=TicketModel, status_code=status.HTTP_201_CREATED)
async def book_ticket(payload: BookingRequest, session: AirlineSession = Depends(get_session)) -> TicketModel:
    """Book a ticket; rejections come back with a stable ``code`` in the error detail."""
    try:
        ticket = session.book_ticket(
            payload.origin,
            payload.destination,
            payload.passenger_id,
            payload.is_return,
            payload.lead_days,
        )
    except BookingError as exc:
        raise booking_http_error(exc) from exc
    return TicketModel.from_domain(ticket)


@router.post("/tickets/age", response_model=AgeTicketsResponse, status_code=status.HTTP_200_OK)
async def age_tickets(payload: AgeTicketsRequest, session: AirlineSession = Depends(get_session)) -> AgeTicketsResponse:
    session.age_all_tickets(payload.years)
    tickets = list(session.list_tickets())
    return AgeTicketsResponse(
        years=payload.years,
        tickets=len(tickets),
        expired=sum(1 for ticket in tickets if not ticket.is_valid()),
    )
