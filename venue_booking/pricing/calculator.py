import logging
from collections import Counter
from datetime import date, datetime

from venue_booking.pricing import extras, schedule
from venue_booking.pricing.errors import NotFoundError, PolicyError, ValidationError
from venue_booking.pricing.policy import DEFAULT_POLICY, PricingPolicy
from venue_booking.pricing.season import day_of_week, resolve_price_list
from venue_booking.pricing.store import RateTableStore
from venue_booking.pricing.types import (
    AddOnLine,
    DayCategory,
    Quote,
    QuoteFailure,
    QuoteRequest,
    RateRecord,
)

logger = logging.getLogger(__name__)

SATURDAY = 6


def _money(value: float) -> float:
    return round(value, 2)


def _hours_label(value: float) -> str:
    if float(value).is_integer():
        value = int(value)
    return f"{value} hour" if value == 1 else f"{value} hours"


# =====================================================================
#                           INPUT VALIDATION
# =====================================================================
def parse_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise ValidationError("Invalid date: expected YYYY-MM-DD", {"field": "date"})


def _validate(request: QuoteRequest):
    missing = [
        name
        for name in ("hall_id", "date", "start_time", "end_time", "guests_count")
        if getattr(request, name) in (None, "")
    ]
    if missing:
        raise ValidationError(
            "Missing required fields: " + ", ".join(missing), {"fields": missing}
        )

    guests = request.guests_count
    if isinstance(guests, bool) or not isinstance(guests, int) or guests < 1:
        raise ValidationError("guests_count must be a positive integer", {"field": "guests_count"})

    return (
        parse_date(request.date),
        schedule.parse_time(request.start_time, "start_time"),
        schedule.parse_time(request.end_time, "end_time"),
    )


# =====================================================================
#                            RATE SELECTION
# =====================================================================
def _find_rate_record(store: RateTableStore, hall_id: str, price_list_id: str, policy: PricingPolicy, warnings: list):
    record = store.get_rate_record(hall_id, price_list_id)
    if record is not None:
        return record, price_list_id

    fallback = policy.default_price_list_id
    if price_list_id != fallback:
        record = store.get_rate_record(hall_id, fallback)
        if record is not None:
            logger.warning(
                "Hall %s has no rates under %s, using %s", hall_id, price_list_id, fallback
            )
            warnings.append(
                f"No rates for price list '{price_list_id}', '{fallback}' applied"
            )
            return record, fallback

    raise NotFoundError(
        f"No prices found for hall '{hall_id}'",
        {"hall_id": hall_id, "price_list_id": price_list_id},
    )


def _base_rate(record: RateRecord, category: DayCategory, start_time, policy: PricingPolicy) -> float:
    if category == DayCategory.FRIDAY_SATURDAY:
        return record.friday_saturday_rate
    if category == DayCategory.SUNDAY:
        return record.sunday_rate
    late = start_time >= policy.late_weekday_rate_from or schedule.is_rolled_over(start_time, policy)
    if late and record.weekday_rate_22_00:
        return record.weekday_rate_22_00
    return record.weekday_rate_10_22


def _hall_capacity(store: RateTableStore, hall_id: str) -> int | None:
    for hall in store.list_active_halls():
        if hall.id == hall_id:
            return hall.capacity
    return None


def _cleaning_cost(record: RateRecord, guests_count: int, policy: PricingPolicy) -> float:
    if guests_count <= policy.cleaning_guest_threshold:
        return record.cleaning_fee_up_to_30
    return record.cleaning_fee_over_30


# =====================================================================
#                               ADD-ONS
# =====================================================================
def _price_add_ons(store: RateTableStore, add_on_ids, price_list_id: str, guests_count: int, warnings: list):
    services = {service.id: service for service in store.list_active_add_ons()}
    # keep first-selection order, repeated ids are extra units
    quantities = Counter(add_on_ids)

    lines = []
    for add_on_id, quantity in quantities.items():
        service = services.get(add_on_id)
        if service is None:
            logger.warning("Unknown or inactive add-on %s", add_on_id)
            warnings.append(f"Add-on '{add_on_id}' is not available")
            lines.append(AddOnLine(add_on_id, add_on_id, quantity, 0.0))
            continue

        record = store.get_add_on_cost_record(add_on_id, price_list_id)
        if record is None or not record.is_priced:
            logger.warning("Add-on %s has no price under %s", add_on_id, price_list_id)
            warnings.append(
                f"Add-on '{service.name}' has no price for price list '{price_list_id}'"
            )
            lines.append(AddOnLine(add_on_id, service.name, quantity, 0.0))
            continue

        total = sum(
            extras.cost(service, record, guests_count, unit_index=i) for i in range(quantity)
        )
        lines.append(AddOnLine(add_on_id, service.name, quantity, _money(total)))

    return lines


# =====================================================================
#                          RENTAL PRICE QUOTE
# =====================================================================
def calculate(
    request: QuoteRequest,
    store: RateTableStore,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> Quote | QuoteFailure:
    """
    Price a hall rental.

    Raises ValidationError for bad input and NotFoundError when the hall has
    no rates. Violated booking rules (minimum hours, food and alcohol) come
    back as a QuoteFailure instead of an exception.
    """
    booking_date, start_time, end_time = _validate(request)
    warnings = []

    season_price_list = resolve_price_list(
        booking_date, store.get_season_rules(), default=policy.default_price_list_id
    )
    record, price_list_id = _find_rate_record(
        store, request.hall_id, season_price_list, policy, warnings
    )
    logger.debug(
        "Pricing hall %s on %s with price list %s", request.hall_id, booking_date, price_list_id
    )

    category = schedule.categorize(booking_date, start_time, policy)
    billable_hours = schedule.hours(start_time, end_time)

    try:
        capacity = _hall_capacity(store, request.hall_id)
        if capacity is not None and request.guests_count > capacity:
            raise PolicyError(
                f"hall holds at most {capacity} guests",
                {"guests_count": request.guests_count, "capacity": capacity},
            )

        rental_day = schedule.effective_day(booking_date, start_time, policy)
        is_saturday = day_of_week(rental_day) == SATURDAY
        minimum = record.effective_minimum_hours(is_saturday)
        if billable_hours < minimum:
            raise PolicyError(
                f"minimum rental is {_hours_label(minimum)}",
                {"hours": billable_hours, "minimum_hours": minimum, "day_category": category.value},
            )

        base_price = _base_rate(record, category, start_time, policy)
        base_cost = _money(base_price * billable_hours)
        cleaning_cost = _money(_cleaning_cost(record, request.guests_count, policy))
        after_hours = _money(
            schedule.after_hours_fee(category, start_time, end_time, record.after_hours_fee, policy)
        )

        lines = _price_add_ons(
            store, list(request.extra_service_ids or ()), price_list_id, request.guests_count, warnings
        )
        add_on_cost = _money(sum(line.cost for line in lines))

        total = _money(base_cost + cleaning_cost + after_hours + add_on_cost)

        if request.food_alcohol and billable_hours < record.food_alcohol_min_hours:
            raise PolicyError(
                "food and alcohol are allowed only for rentals of "
                f"{_hours_label(record.food_alcohol_min_hours)} or more",
                {"hours": billable_hours, "minimum_hours": record.food_alcohol_min_hours},
            )
    except PolicyError as exc:
        logger.info("Quote rejected for hall %s: %s", request.hall_id, exc.message)
        return QuoteFailure(error=exc.message, code=exc.code, details=exc.details)

    return Quote(
        base_price=base_price,
        billable_hours=billable_hours,
        base_cost=base_cost,
        cleaning_cost=cleaning_cost,
        after_hours_fee=after_hours,
        add_on_cost=add_on_cost,
        total=total,
        day_category=category,
        resolved_price_list_id=price_list_id,
        add_ons=tuple(lines),
        warnings=tuple(warnings),
    )
