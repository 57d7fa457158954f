from datetime import time

import pytest

from venue_booking.pricing.errors import ValidationError
from venue_booking.pricing.policy import OperatingWindow, PricingPolicy
from venue_booking.pricing.schedule import (
    after_hours_fee,
    after_hours_minutes,
    categorize,
    effective_day,
    hours,
    is_rolled_over,
    parse_time,
)
from venue_booking.pricing.types import DayCategory

from tests.conftest import FRIDAY, SATURDAY, SUNDAY, TUESDAY


# ---------------- DAY CATEGORY ----------------
def test_sunday_is_sunday():
    assert categorize(SUNDAY, time(12, 0)) == DayCategory.SUNDAY


def test_saturday_is_friday_saturday_all_day():
    assert categorize(SATURDAY, time(9, 0)) == DayCategory.FRIDAY_SATURDAY
    assert categorize(SATURDAY, time(23, 0)) == DayCategory.FRIDAY_SATURDAY


def test_friday_cutoff_boundary():
    assert categorize(FRIDAY, time(16, 59)) == DayCategory.WEEKDAY
    assert categorize(FRIDAY, time(17, 0)) == DayCategory.FRIDAY_SATURDAY


def test_monday_to_thursday_are_weekdays():
    assert categorize(TUESDAY, time(20, 0)) == DayCategory.WEEKDAY


def test_friday_cutoff_is_configurable():
    policy = PricingPolicy(friday_evening_start=time(18, 0))
    assert categorize(FRIDAY, time(17, 30), policy) == DayCategory.WEEKDAY
    assert categorize(FRIDAY, time(18, 0), policy) == DayCategory.FRIDAY_SATURDAY


def test_day_rollover_moves_early_start_to_previous_day():
    policy = PricingPolicy(day_rollover=time(8, 0))
    # Saturday 02:00 belongs to Friday night
    assert categorize(SATURDAY, time(2, 0), policy) == DayCategory.FRIDAY_SATURDAY
    # Friday 03:00 is still Thursday night
    assert categorize(FRIDAY, time(3, 0), policy) == DayCategory.WEEKDAY
    # Sunday 07:00 still counts as Saturday night
    assert categorize(SUNDAY, time(7, 0), policy) == DayCategory.FRIDAY_SATURDAY
    assert categorize(SUNDAY, time(8, 0), policy) == DayCategory.SUNDAY


# ---------------- DURATION ----------------
def test_hours_same_day():
    assert hours(time(12, 0), time(16, 0)) == 4


def test_hours_overnight_wraps_midnight():
    assert hours(time(22, 0), time(2, 0)) == 4


def test_hours_with_minutes():
    assert hours(time(10, 30), time(12, 0)) == 1.5


def test_hours_is_not_clamped_to_minimum():
    assert hours(time(12, 0), time(13, 0)) == 1


def test_equal_times_mean_a_full_day():
    assert hours(time(10, 0), time(10, 0)) == 24


# ---------------- AFTER HOURS ----------------
def test_no_fee_inside_normal_window():
    assert after_hours_fee(DayCategory.WEEKDAY, time(12, 0), time(16, 0), 400) == 0


def test_fee_for_evening_past_22():
    assert after_hours_minutes(DayCategory.WEEKDAY, time(20, 0), time(0, 0)) == 120
    assert after_hours_fee(DayCategory.WEEKDAY, time(20, 0), time(0, 0), 400) == 800


def test_fee_for_whole_overnight_booking():
    assert after_hours_fee(DayCategory.FRIDAY_SATURDAY, time(22, 0), time(2, 0), 400) == 1600


def test_fee_for_early_morning_before_opening():
    assert after_hours_fee(DayCategory.SUNDAY, time(8, 0), time(12, 0), 400) == 800


def test_fee_counts_partial_hours():
    assert after_hours_fee(DayCategory.WEEKDAY, time(21, 30), time(23, 0), 400) == 400


def test_fee_through_the_night_into_next_morning():
    # 20:00 -> 11:00, night band 22:00-10:00 is 12 hours
    assert after_hours_minutes(DayCategory.WEEKDAY, time(20, 0), time(11, 0)) == 12 * 60


def test_window_past_midnight_is_supported():
    policy = PricingPolicy(
        after_hours_windows={c: OperatingWindow(time(10, 0), time(2, 0)) for c in DayCategory}
    )
    assert after_hours_minutes(DayCategory.WEEKDAY, time(22, 0), time(2, 0), policy) == 0
    assert after_hours_minutes(DayCategory.WEEKDAY, time(0, 0), time(3, 0), policy) == 60


def test_windows_differ_per_category():
    policy = PricingPolicy(
        after_hours_windows={
            DayCategory.WEEKDAY: OperatingWindow(time(10, 0), time(22, 0)),
            DayCategory.FRIDAY_SATURDAY: OperatingWindow(time(10, 0), time(0, 0)),
            DayCategory.SUNDAY: OperatingWindow(time(10, 0), time(22, 0)),
        }
    )
    assert after_hours_minutes(DayCategory.FRIDAY_SATURDAY, time(20, 0), time(0, 0), policy) == 0
    assert after_hours_minutes(DayCategory.WEEKDAY, time(20, 0), time(0, 0), policy) == 120


def test_missing_fee_counts_as_zero():
    assert after_hours_fee(DayCategory.WEEKDAY, time(22, 0), time(2, 0), None) == 0


# ---------------- PARSING ----------------
@pytest.mark.parametrize("value, expected", [
    ("12:00", time(12, 0)),
    ("09:30:00", time(9, 30)),
    (time(7, 15), time(7, 15)),
])
def test_parse_time(value, expected):
    assert parse_time(value) == expected


@pytest.mark.parametrize("value", ["25:00", "noon", "", None, 1200])
def test_parse_time_rejects_garbage(value):
    with pytest.raises(ValidationError):
        parse_time(value, "start_time")


def test_parse_time_rejects_seconds():
    with pytest.raises(ValidationError):
        parse_time("12:00:30", "start_time")
    with pytest.raises(ValidationError):
        parse_time(time(12, 0, 30), "start_time")


# ---------------- ROLLOVER ----------------
def test_rollover_is_off_by_default():
    assert not is_rolled_over(time(1, 0))
    assert effective_day(SATURDAY, time(1, 0)) == SATURDAY


def test_effective_day_moves_back_before_rollover():
    policy = PricingPolicy(day_rollover=time(6, 0))

    assert is_rolled_over(time(5, 59), policy)
    assert not is_rolled_over(time(6, 0), policy)
    assert effective_day(SATURDAY, time(2, 0), policy) == FRIDAY
    assert effective_day(SATURDAY, time(6, 0), policy) == SATURDAY
