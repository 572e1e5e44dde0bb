"""Airport API schemas."""

from __future__ import annotations

from pydantic import BaseModel

from ..models.domain import Airport


class AirportModel(BaseModel):
    code: str
    name: str
    x: float
    y: float

    @classmethod
    def from_domain(cls, airport: Airport) -> "AirportModel":
        return cls(code=airport.code, name=airport.name, x=airport.x, y=airport.y)
