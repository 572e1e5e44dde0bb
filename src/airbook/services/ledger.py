"""Storage for issued tickets."""

from __future__ import annotations

import itertools
import logging
from typing import Iterator

from ..models.domain import Ticket


class TicketLedger:
    """Append-only ticket store. Expired tickets stay; only validity changes."""

    def __init__(self) -> None:
        self._tickets: list[Ticket] = []
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._tickets)

    def __iter__(self) -> Iterator[Ticket]:
        return self.list_tickets()

    def allocate_id(self) -> int:
        return next(self._ids)

    def record_ticket(self, ticket: Ticket) -> None:
        self._tickets.append(ticket)

    def list_tickets(self) -> Iterator[Ticket]:
        """Yield tickets in booking order; each call starts a fresh pass."""
        yield from self._tickets

    def age_all(self, years: int) -> None:
        for ticket in self._tickets:
            ticket.age(years)
        logging.info(f"{years} year(s) passed; aged {len(self._tickets)} ticket(s)")
