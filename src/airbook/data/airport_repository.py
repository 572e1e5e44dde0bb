"""Fixed airport catalog used by every session."""

from __future__ import annotations

import functools

from ..models.domain import Airport

_SEED_AIRPORTS: tuple[tuple[str, str, float, float], ...] = (
    ("DEL", "Delhi", 0.0, 0.0),
    ("BOM", "Mumbai", 100.0, 40.0),
    ("BLR", "Bangalore", 50.0, -80.0),
    ("HYD", "Hyderabad", 60.0, -30.0),
    ("MAA", "Chennai", 70.0, -90.0),
    ("CCU", "Kolkata", 120.0, 90.0),
)


@functools.lru_cache(maxsize=1)
def load_airports() -> tuple[Airport, ...]:
    """Build the seeded catalog once per process."""

    return tuple(Airport(code=code, name=name, x=x, y=y) for code, name, x, y in _SEED_AIRPORTS)


class AirportCatalog:
    """Read-only lookup over a set of airports keyed by code."""

    def __init__(self, airports: tuple[Airport, ...] | None = None) -> None:
        entries = airports if airports is not None else load_airports()
        self._by_code: dict[str, Airport] = {}
        for airport in entries:
            if airport.code in self._by_code:
                raise ValueError(f"Duplicate airport code '{airport.code}' in catalog.")
            self._by_code[airport.code] = airport

    def __len__(self) -> int:
        return len(self._by_code)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def list_airports(self) -> list[Airport]:
        return list(self._by_code.values())

    def get_airport(self, code: str) -> Airport | None:
        return self._by_code.get(code)
