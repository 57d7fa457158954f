from datetime import date

import pytest

from venue_booking.pricing.season import day_of_week, matching_rules, resolve_price_list
from venue_booking.pricing.types import SeasonRule

ALL_DAYS = frozenset(range(7))


def rule(price_list_id, start, end, days=ALL_DAYS, priority=1):
    return SeasonRule(price_list_id, start, end, frozenset(days), priority)


def test_day_of_week_starts_on_sunday():
    assert day_of_week(date(2025, 11, 9)) == 0  # Sunday
    assert day_of_week(date(2025, 11, 10)) == 1  # Monday
    assert day_of_week(date(2025, 11, 8)) == 6  # Saturday


def test_no_rules_resolves_to_standard():
    assert resolve_price_list(date(2025, 11, 4), []) == "standard"


def test_date_outside_every_rule_resolves_to_standard():
    rules = [rule("december", date(2025, 12, 8), date(2025, 12, 31))]
    assert resolve_price_list(date(2025, 12, 7), rules) == "standard"


def test_default_can_be_overridden():
    assert resolve_price_list(date(2025, 11, 4), [], default="base") == "base"


def test_range_is_inclusive_on_both_ends():
    rules = [rule("december", date(2025, 12, 8), date(2025, 12, 31))]
    assert resolve_price_list(date(2025, 12, 8), rules) == "december"
    assert resolve_price_list(date(2025, 12, 31), rules) == "december"


def test_higher_priority_wins_over_overlapping_rule():
    rules = [
        rule("low", date(2025, 12, 1), date(2025, 12, 31), priority=1),
        rule("high", date(2025, 12, 10), date(2025, 12, 20), priority=5),
    ]
    assert resolve_price_list(date(2025, 12, 15), rules) == "high"
    # reversed input order does not change the winner
    assert resolve_price_list(date(2025, 12, 15), list(reversed(rules))) == "high"


def test_equal_priority_goes_to_first_rule_in_input_order():
    first = rule("first", date(2025, 12, 1), date(2025, 12, 31), priority=3)
    second = rule("second", date(2025, 12, 1), date(2025, 12, 31), priority=3)

    assert resolve_price_list(date(2025, 12, 15), [first, second]) == "first"
    assert resolve_price_list(date(2025, 12, 15), [second, first]) == "second"


def test_days_of_week_mask_filters_rules():
    # December weekends only: Friday, Saturday, Sunday
    weekend = rule("december_weekend", date(2025, 12, 1), date(2025, 12, 31), days={5, 6, 0})

    assert resolve_price_list(date(2025, 12, 12), [weekend]) == "december_weekend"  # Friday
    assert resolve_price_list(date(2025, 12, 14), [weekend]) == "december_weekend"  # Sunday
    assert resolve_price_list(date(2025, 12, 9), [weekend]) == "standard"  # Tuesday


def test_matching_rules_keeps_input_order():
    a = rule("a", date(2025, 1, 1), date(2025, 12, 31))
    b = rule("b", date(2025, 6, 1), date(2025, 6, 30))
    c = rule("c", date(2025, 1, 1), date(2025, 12, 31), days={0})

    assert matching_rules(date(2025, 6, 10), [a, b, c]) == [a, b]


def test_resolution_is_idempotent():
    rules = [
        rule("december", date(2025, 12, 1), date(2025, 12, 31), priority=2),
        rule("new_year", date(2025, 12, 30), date(2026, 1, 2), priority=2),
    ]
    results = {resolve_price_list(date(2025, 12, 31), rules) for _ in range(5)}
    assert results == {"december"}


def test_rule_rejects_inverted_range():
    with pytest.raises(ValueError):
        rule("bad", date(2025, 12, 31), date(2025, 12, 1))


def test_rule_rejects_empty_mask():
    with pytest.raises(ValueError):
        rule("bad", date(2025, 12, 1), date(2025, 12, 31), days=set())


def test_rule_rejects_unknown_day():
    with pytest.raises(ValueError):
        rule("bad", date(2025, 12, 1), date(2025, 12, 31), days={7})


def test_parse_mask():
    assert SeasonRule.parse_mask("0, 5,6") == frozenset({0, 5, 6})
    assert SeasonRule.parse_mask("1,,x,3") == frozenset({1, 3})
    assert SeasonRule.parse_mask("") == frozenset()
