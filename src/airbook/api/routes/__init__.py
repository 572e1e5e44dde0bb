"""Route group exports."""

from . import airports, health, people, tickets

__all__ = ["airports", "health", "people", "tickets"]
