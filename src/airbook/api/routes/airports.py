"""Airport catalog endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ...schemas.airports import AirportModel
from ...services.session import AirlineSession
from ..dependencies import get_session

router = APIRouter(prefix="/airports", tags=["airports"])


@router.get("", response_model=List[AirportModel], status_code=status.HTTP_200_OK)
async def list_airports(session: AirlineSession = Depends(get_session)) -> List[AirportModel]:
    return [AirportModel.from_domain(airport) for airport in session.list_airports()]


@router.get("/{code}", response_model=AirportModel, status_code=status.HTTP_200_OK)
async def get_airport(
    code: str = Path(..., description="Airport code, e.g. DEL"),
    session: AirlineSession = Depends(get_session),
) -> AirportModel:
    airport = session.get_airport(code.strip().upper())
    if airport is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown airport '{code}'.")
    return AirportModel.from_domain(airport)
