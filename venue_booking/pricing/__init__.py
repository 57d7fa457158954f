"""Seasonal price-list resolution and rental cost calculation."""

from venue_booking.pricing.calculator import calculate
from venue_booking.pricing.errors import NotFoundError, PolicyError, PricingError, ValidationError
from venue_booking.pricing.policy import DEFAULT_POLICY, OperatingWindow, PricingPolicy
from venue_booking.pricing.store import InMemoryRateTableStore, RateTableStore
from venue_booking.pricing.types import (
    AddOnCostRecord,
    AddOnLine,
    AddOnService,
    DayCategory,
    Hall,
    PricingType,
    Quote,
    QuoteFailure,
    QuoteRequest,
    RateRecord,
    SeasonRule,
)

__all__ = [
    "calculate",
    "PricingError",
    "ValidationError",
    "NotFoundError",
    "PolicyError",
    "DEFAULT_POLICY",
    "OperatingWindow",
    "PricingPolicy",
    "RateTableStore",
    "InMemoryRateTableStore",
    "AddOnCostRecord",
    "AddOnLine",
    "AddOnService",
    "DayCategory",
    "Hall",
    "PricingType",
    "Quote",
    "QuoteFailure",
    "QuoteRequest",
    "RateRecord",
    "SeasonRule",
]
