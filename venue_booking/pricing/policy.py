from dataclasses import dataclass, field
from datetime import time
from typing import Mapping, NamedTuple

from venue_booking.pricing.types import DayCategory


class OperatingWindow(NamedTuple):
    """Normal hours of a day category. `closes <= opens` runs past midnight."""

    opens: time
    closes: time


DEFAULT_STANDARD_PRICE_LIST = "standard"

# Night band 22:00-10:00 is surcharged on every day.
DEFAULT_OPERATING_WINDOW = OperatingWindow(time(10, 0), time(22, 0))


def _default_windows():
    return {category: DEFAULT_OPERATING_WINDOW for category in DayCategory}


@dataclass(frozen=True)
class PricingPolicy:
    friday_evening_start: time = time(17, 0)
    late_weekday_rate_from: time = time(22, 0)
    after_hours_windows: Mapping = field(default_factory=_default_windows)
    cleaning_guest_threshold: int = 30
    default_price_list_id: str = DEFAULT_STANDARD_PRICE_LIST
    # Bookings starting before this time count as the previous day. 00:00 disables it.
    day_rollover: time = time(0, 0)

    def window_for(self, category: DayCategory) -> OperatingWindow:
        return self.after_hours_windows.get(category, DEFAULT_OPERATING_WINDOW)


DEFAULT_POLICY = PricingPolicy()
