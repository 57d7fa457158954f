import math
import re

from venue_booking.pricing.types import AddOnCostRecord, AddOnService, PricingType

_PEOPLE_COUNT = re.compile(r"(\d+)\s*(?:человек|чел)", re.IGNORECASE)
_EACH_COUNT = re.compile(r"(?:за\s+каждые|за|по|\+)\s*(\d+)", re.IGNORECASE)
_PRICE_NUMBER = re.compile(r"(?:руб|₽|цена|стоимость|price)\s*(\d+)", re.IGNORECASE)
_ANY_NUMBER = re.compile(r"(\d+)")

PER_ITEM_WORDS = ("бокал", "за штуку", "за единицу", "за экземпляр")


def parse_unit_size(description: str | None) -> int:
    """Guests per billing unit, read from text such as "за каждые 10 человек"."""
    text = description or ""

    match = _PEOPLE_COUNT.search(text)
    if not match:
        match = _EACH_COUNT.search(text)
    if not match:
        match = _ANY_NUMBER.search(_PRICE_NUMBER.sub("", text, count=1))

    if not match:
        return 1
    return max(1, int(match.group(1)))


def is_per_item(description: str | None) -> bool:
    text = (description or "").lower()
    return any(word in text for word in PER_ITEM_WORDS)


def _price(value) -> float:
    return float(value) if value and value > 0 else 0.0


def cost(
    service: AddOnService,
    record: AddOnCostRecord | None,
    guests_count: int,
    unit_index: int = 0,
) -> float:
    """
    Cost of one selected unit of an add-on.

    `unit_index` is 0 for the first unit of the add-on in a booking, 1 for
    the second and so on. Only complex add-ons price later units differently.
    """
    if record is None or not record.is_priced:
        return 0.0

    base = _price(record.base_price)
    additional = _price(record.additional_unit_price)
    pricing_type = PricingType(service.pricing_type)

    if pricing_type == PricingType.FIXED:
        return base

    if pricing_type == PricingType.PER_UNIT:
        if is_per_item(record.unit_description):
            return base
        size = parse_unit_size(record.unit_description)
        return math.ceil(guests_count / size) * base

    # complex: first unit at base price, further units at the additional price
    if unit_index == 0:
        return base or additional
    return additional or base
