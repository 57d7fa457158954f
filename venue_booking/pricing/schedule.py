from datetime import date, datetime, time, timedelta

from venue_booking.pricing.errors import ValidationError
from venue_booking.pricing.policy import DEFAULT_POLICY, PricingPolicy
from venue_booking.pricing.season import day_of_week
from venue_booking.pricing.types import DayCategory

MINUTES_PER_DAY = 24 * 60

FRIDAY = 5
SATURDAY = 6
SUNDAY = 0


def parse_time(value, field_name: str = "time") -> time:
    parsed = None
    if isinstance(value, time):
        parsed = value
    elif isinstance(value, str):
        for fmt in ("%H:%M", "%H:%M:%S"):
            try:
                parsed = datetime.strptime(value.strip(), fmt).time()
                break
            except ValueError:
                continue

    if parsed is None:
        raise ValidationError(f"Invalid {field_name}: expected HH:MM", {"field": field_name})
    # billing works in whole minutes
    if parsed.second or parsed.microsecond:
        raise ValidationError(
            f"Invalid {field_name}: seconds are not supported", {"field": field_name}
        )
    return parsed


def _minutes(t: time) -> int:
    return t.hour * 60 + t.minute


def _span(start_time: time, end_time: time) -> tuple[int, int]:
    start = _minutes(start_time)
    end = _minutes(end_time)
    # end at or before start means the booking runs past midnight
    if end <= start:
        end += MINUTES_PER_DAY
    return start, end


# =====================================================================
#                           DAY CATEGORY
# =====================================================================
def is_rolled_over(start_time: time, policy: PricingPolicy = DEFAULT_POLICY) -> bool:
    """True when the start is the late night of the previous day."""
    return policy.day_rollover > time(0, 0) and start_time < policy.day_rollover


def effective_day(day: date, start_time: time, policy: PricingPolicy = DEFAULT_POLICY) -> date:
    if is_rolled_over(start_time, policy):
        return day - timedelta(days=1)
    return day


def categorize(day: date, start_time: time, policy: PricingPolicy = DEFAULT_POLICY) -> DayCategory:
    rolled_over = is_rolled_over(start_time, policy)
    dow = day_of_week(effective_day(day, start_time, policy))

    if dow == SUNDAY:
        return DayCategory.SUNDAY
    if dow == SATURDAY:
        return DayCategory.FRIDAY_SATURDAY
    if dow == FRIDAY and (rolled_over or start_time >= policy.friday_evening_start):
        return DayCategory.FRIDAY_SATURDAY
    return DayCategory.WEEKDAY


# =====================================================================
#                             DURATION
# =====================================================================
def hours(start_time: time, end_time: time) -> float:
    """Elapsed hours between two wall-clock times, never clamped to a minimum."""
    start, end = _span(start_time, end_time)
    return (end - start) / 60


# =====================================================================
#                          AFTER-HOURS FEE
# =====================================================================
def after_hours_minutes(
    day_category: DayCategory,
    start_time: time,
    end_time: time,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> int:
    start, end = _span(start_time, end_time)
    window = policy.window_for(day_category)

    opens = _minutes(window.opens)
    closes = _minutes(window.closes)
    if closes <= opens:
        closes += MINUTES_PER_DAY

    inside = 0
    # previous day's window can still be open after midnight
    for offset in (-MINUTES_PER_DAY, 0, MINUTES_PER_DAY):
        lo = max(start, opens + offset)
        hi = min(end, closes + offset)
        if hi > lo:
            inside += hi - lo

    return (end - start) - inside


def after_hours_fee(
    day_category: DayCategory,
    start_time: time,
    end_time: time,
    hourly_fee: float,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> float:
    minutes = after_hours_minutes(day_category, start_time, end_time, policy)
    return minutes / 60 * (hourly_fee or 0)
