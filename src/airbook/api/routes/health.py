"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...services.session import AirlineSession
from ..dependencies import get_session

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_root(session: AirlineSession = Depends(get_session)) -> dict:
    """Liveness check with a snapshot of the session size."""
    return {
        "status": "ok",
        "airports": len(session.catalog),
        "people": len(session.roster),
        "tickets": len(session.ledger),
    }
