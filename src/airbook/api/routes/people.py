"""Roster endpoints for passengers and crew."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ...schemas.people import (
    AttendantCreate,
    PersonModel,
    PilotCreate,
    RosterSummaryModel,
    TravelerCreate,
)
from ...services.session import AirlineSession
from ..dependencies import get_session

router = APIRouter(prefix="/people", tags=["people"])


@router.get("", response_model=List[PersonModel], status_code=status.HTTP_200_OK)
async def list_people(session: AirlineSession = Depends(get_session)) -> List[PersonModel]:
    return [PersonModel.from_domain(person) for person in session.list_people()]


@router.get("/summary", response_model=RosterSummaryModel, status_code=status.HTTP_200_OK)
async def roster_summary(session: AirlineSession = Depends(get_session)) -> RosterSummaryModel:
    return RosterSummaryModel.from_domain(session.roster_summary())


@router.get("/{person_id}", response_model=PersonModel, status_code=status.HTTP_200_OK)
async def get_person(
    person_id: int = Path(..., description="Roster id"),
    session: AirlineSession = Depends(get_session),
) -> PersonModel:
    person = session.find_person_by_id(person_id)
    if person is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Person #{person_id} not found.")
    return PersonModel.from_domain(person)


@router.post("/travelers", response_model=PersonModel, status_code=status.HTTP_201_CREATED)
async def add_traveler(payload: TravelerCreate, session: AirlineSession = Depends(get_session)) -> PersonModel:
    return PersonModel.from_domain(session.add_traveler(payload.name))


@router.post("/pilots", response_model=PersonModel, status_code=status.HTTP_201_CREATED)
async def add_pilot(payload: PilotCreate, session: AirlineSession = Depends(get_session)) -> PersonModel:
    return PersonModel.from_domain(session.add_pilot(payload.name, payload.years_experience))


@router.post("/attendants", response_model=PersonModel, status_code=status.HTTP_201_CREATED)
async def add_attendant(payload: AttendantCreate, session: AirlineSession = Depends(get_session)) -> PersonModel:
    return PersonModel.from_domain(session.add_attendant(payload.name, payload.airline))
