from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum
from typing import Mapping


class DayCategory(str, Enum):
    WEEKDAY = "weekday"
    FRIDAY_SATURDAY = "friday_saturday"
    SUNDAY = "sunday"


class PricingType(str, Enum):
    FIXED = "fixed"
    PER_UNIT = "per_unit"
    COMPLEX = "complex"


@dataclass(frozen=True)
class Hall:
    id: str
    name: str
    capacity: int
    is_active: bool = True
    sort_order: int = 0


@dataclass(frozen=True)
class RateRecord:
    """Rates of one hall under one price list."""

    weekday_rate_10_22: float
    weekday_rate_22_00: float
    friday_saturday_rate: float
    sunday_rate: float
    cleaning_fee_up_to_30: float
    cleaning_fee_over_30: float
    after_hours_fee: float
    minimum_hours: float = 2
    minimum_hours_saturday: float | None = None
    food_alcohol_min_hours: float = 2

    def __post_init__(self):
        for name in (
            "weekday_rate_10_22",
            "weekday_rate_22_00",
            "friday_saturday_rate",
            "sunday_rate",
            "cleaning_fee_up_to_30",
            "cleaning_fee_over_30",
            "after_hours_fee",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    def effective_minimum_hours(self, is_saturday: bool) -> float:
        if is_saturday and self.minimum_hours_saturday is not None:
            return self.minimum_hours_saturday
        return self.minimum_hours


@dataclass(frozen=True)
class SeasonRule:
    """Maps a date range and a set of weekdays (0 = Sunday) to a price list."""

    price_list_id: str
    start_date: date
    end_date: date
    days_of_week: frozenset
    priority: int = 1

    def __post_init__(self):
        if self.start_date > self.end_date:
            raise ValueError("start_date must be before or equal to end_date")
        if not self.days_of_week:
            raise ValueError("days_of_week must not be empty")
        if any(d not in range(7) for d in self.days_of_week):
            raise ValueError("days_of_week must only contain values 0..6")
        object.__setattr__(self, "days_of_week", frozenset(self.days_of_week))

    @staticmethod
    def parse_mask(mask: str) -> frozenset:
        """Parse the stored "0,5,6" form, ignoring blanks and non-numbers."""
        days = set()
        for part in (mask or "").split(","):
            part = part.strip()
            if part.isdigit():
                days.add(int(part))
        return frozenset(days)

    def covers(self, day: date, day_of_week: int) -> bool:
        return self.start_date <= day <= self.end_date and day_of_week in self.days_of_week


@dataclass(frozen=True)
class AddOnService:
    id: str
    name: str
    pricing_type: PricingType


@dataclass(frozen=True)
class AddOnCostRecord:
    base_price: float | None = None
    additional_unit_price: float | None = None
    unit_description: str | None = None

    @property
    def is_priced(self) -> bool:
        return bool(
            (self.base_price and self.base_price > 0)
            or (self.additional_unit_price and self.additional_unit_price > 0)
        )


@dataclass(frozen=True)
class QuoteRequest:
    hall_id: str | None
    date: date | str | None
    start_time: time | str | None
    end_time: time | str | None
    guests_count: int | None
    extra_service_ids: tuple = ()
    food_alcohol: bool = False


@dataclass(frozen=True)
class AddOnLine:
    add_on_id: str
    name: str
    quantity: int
    cost: float


@dataclass(frozen=True)
class Quote:
    base_price: float
    billable_hours: float
    base_cost: float
    cleaning_cost: float
    after_hours_fee: float
    add_on_cost: float
    total: float
    day_category: DayCategory
    resolved_price_list_id: str
    add_ons: tuple = ()
    warnings: tuple = ()

    @property
    def valid(self) -> bool:
        return True


@dataclass(frozen=True)
class QuoteFailure:
    error: str
    code: str
    details: Mapping = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return False
