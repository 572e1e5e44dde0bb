"""Ticket pricing based on distance, lead time and trip type."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import Settings, settings as default_settings


@dataclass(frozen=True, slots=True)
class FareRules:
    """Pricing constants handed to the calculator at construction."""

    base_price: float = 3000.0
    distance_factor: float = 5.0
    return_multiplier: float = 1.8
    advance_purchase_days: int = 30
    short_notice_days: int = 7
    advance_purchase_multiplier: float = 1.0
    standard_multiplier: float = 1.2
    short_notice_multiplier: float = 1.5

    def __post_init__(self) -> None:
        if self.short_notice_days >= self.advance_purchase_days:
            raise ValueError("short_notice_days must be lower than advance_purchase_days")

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "FareRules":
        config = config or default_settings
        return cls(
            base_price=config.base_ticket_price,
            distance_factor=config.distance_cost_factor,
            return_multiplier=config.return_ticket_multiplier,
            advance_purchase_days=config.advance_purchase_days,
            short_notice_days=config.short_notice_days,
            advance_purchase_multiplier=config.advance_purchase_multiplier,
            standard_multiplier=config.standard_multiplier,
            short_notice_multiplier=config.short_notice_multiplier,
        )


@dataclass(frozen=True, slots=True)
class FareQuote:
    distance: float
    base_fare: float
    lead_time_multiplier: float
    return_multiplier: float
    total: float


class FareCalculator:
    """Deterministic fare model.

    The base fare grows linearly with distance. Lead time picks one of three
    tiers, checked from the farthest out, and return trips pay an extra flat
    multiplier. Any ``lead_days`` is accepted; zero and negative values fall
    into the short-notice tier.
    """

    def __init__(self, rules: FareRules | None = None) -> None:
        self.rules = rules or FareRules()

    def lead_time_multiplier(self, lead_days: int) -> float:
        if lead_days > self.rules.advance_purchase_days:
            return self.rules.advance_purchase_multiplier
        if lead_days > self.rules.short_notice_days:
            return self.rules.standard_multiplier
        return self.rules.short_notice_multiplier

    def quote(self, distance: float, lead_days: int, is_return: bool) -> FareQuote:
        if distance < 0:
            raise ValueError("distance must be >= 0")

        base_fare = self.rules.base_price + distance * self.rules.distance_factor
        lead_multiplier = self.lead_time_multiplier(lead_days)
        return_multiplier = self.rules.return_multiplier if is_return else 1.0

        total = base_fare * lead_multiplier
        if is_return:
            total *= self.rules.return_multiplier

        return FareQuote(
            distance=distance,
            base_fare=base_fare,
            lead_time_multiplier=lead_multiplier,
            return_multiplier=return_multiplier,
            total=total,
        )

    def compute_fare(self, distance: float, lead_days: int, is_return: bool) -> float:
        return self.quote(distance, lead_days, is_return).total


def compute_fare(
    distance: float,
    lead_days: int,
    is_return: bool,
    *,
    rules: FareRules | None = None,
) -> float:
    """Price a ticket with the given (or default) fare rules."""

    return FareCalculator(rules).compute_fare(distance, lead_days, is_return)
