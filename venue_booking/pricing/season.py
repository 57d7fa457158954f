from datetime import date
from typing import Iterable

from venue_booking.pricing.policy import DEFAULT_STANDARD_PRICE_LIST
from venue_booking.pricing.types import SeasonRule


def day_of_week(day: date) -> int:
    """Day of week with 0 = Sunday, 6 = Saturday."""
    return (day.weekday() + 1) % 7


def matching_rules(day: date, rules: Iterable[SeasonRule]) -> list[SeasonRule]:
    dow = day_of_week(day)
    return [rule for rule in rules if rule.covers(day, dow)]


def resolve_price_list(
    day: date,
    rules: Iterable[SeasonRule],
    default: str = DEFAULT_STANDARD_PRICE_LIST,
) -> str:
    """
    Pick the price list for a date.

    The highest priority matching rule wins. Among rules sharing the top
    priority the one listed first in `rules` wins.
    """
    best = None
    for rule in matching_rules(day, rules):
        if best is None or rule.priority > best.priority:
            best = rule

    if best is None:
        return default
    return best.price_list_id
