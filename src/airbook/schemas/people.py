"""Pydantic request/response models for roster endpoints."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..models.domain import Attendant, Person, Pilot, role_kind, role_label
from ..services.roster import RosterSummary


class _NamedRequest(BaseModel):
    name: str = Field(..., description="Display name; duplicates are allowed.")

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value


class TravelerCreate(_NamedRequest):
    pass


class PilotCreate(_NamedRequest):
    years_experience: int = Field(..., ge=0, description="Years of flying experience.")


class AttendantCreate(_NamedRequest):
    airline: str = Field(..., min_length=1, description="Airline the attendant works for.")


class PersonModel(BaseModel):
    id: int
    name: str
    role: Literal["traveler", "pilot", "attendant"]
    role_label: str
    years_experience: Optional[int] = None
    airline: Optional[str] = None

    @classmethod
    def from_domain(cls, person: Person) -> "PersonModel":
        years = person.role.years_experience if isinstance(person.role, Pilot) else None
        airline = person.role.airline if isinstance(person.role, Attendant) else None
        return cls(
            id=person.person_id,
            name=person.name,
            role=role_kind(person.role),
            role_label=role_label(person.role),
            years_experience=years,
            airline=airline,
        )


class RosterSummaryModel(BaseModel):
    total: int
    travelers: int
    pilots: int
    attendants: int
    crew_ok: bool

    @classmethod
    def from_domain(cls, summary: RosterSummary) -> "RosterSummaryModel":
        return cls(
            total=summary.total,
            travelers=summary.travelers,
            pilots=summary.pilots,
            attendants=summary.attendants,
            crew_ok=summary.crew_ok,
        )
