from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from venue_booking.core.config import get_pricing_policy
from venue_booking.db.session import get_db
from venue_booking.models.extra import Extra, ExtraPrice
from venue_booking.models.hall import Hall
from venue_booking.models.hall_price import HallPrice
from venue_booking.models.price_set import PriceSet
from venue_booking.models.season_rule import SeasonRule
from venue_booking.pricing import Quote, QuoteRequest, calculate
from venue_booking.pricing.season import resolve_price_list
from venue_booking.pricing.types import SeasonRule as PricingSeasonRule
from venue_booking.repositories.rate_table import SqlAlchemyRateTableStore
from venue_booking.schemas.pricing import (
    AddOnLineOut,
    PriceListOut,
    QuoteFailureOut,
    QuoteOut,
    QuoteRequestIn,
)


router = APIRouter(prefix="/pricing", tags=["Pricing"])


def to_quote_request(data: QuoteRequestIn) -> QuoteRequest:
    return QuoteRequest(
        hall_id=data.hall_id,
        date=data.date,
        start_time=data.start_time,
        end_time=data.end_time,
        guests_count=data.guests_count,
        extra_service_ids=tuple(data.extra_service_ids),
        food_alcohol=data.food_alcohol,
    )


def quote_out(result) -> QuoteOut | QuoteFailureOut:
    if not isinstance(result, Quote):
        return QuoteFailureOut(error=result.error, code=result.code, details=dict(result.details))

    return QuoteOut(
        base_price=result.base_price,
        billable_hours=result.billable_hours,
        base_cost=result.base_cost,
        cleaning_cost=result.cleaning_cost,
        after_hours_fee=result.after_hours_fee,
        add_on_cost=result.add_on_cost,
        total=result.total,
        day_category=result.day_category.value,
        resolved_price_list_id=result.resolved_price_list_id,
        add_ons=[
            AddOnLineOut(add_on_id=l.add_on_id, name=l.name, quantity=l.quantity, cost=l.cost)
            for l in result.add_ons
        ],
        warnings=list(result.warnings),
    )


# =====================================================================
#                         CALCULATE RENTAL PRICE
# =====================================================================
@router.post("/calculate", response_model=QuoteOut | QuoteFailureOut)
def calculate_price(data: QuoteRequestIn, db: Session = Depends(get_db)):
    store = SqlAlchemyRateTableStore(db)
    result = calculate(to_quote_request(data), store, get_pricing_policy())
    return quote_out(result)


# =====================================================================
#                     PRICE LIST RESOLVED FOR A DATE
# =====================================================================
@router.get("/price-list", response_model=PriceListOut)
def price_list_for_date(date_str: str, db: Session = Depends(get_db)):
    try:
        target_date = date.fromisoformat(date_str)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date format (YYYY-MM-DD)")

    policy = get_pricing_policy()
    rules = SqlAlchemyRateTableStore(db).get_season_rules()

    return PriceListOut(
        date=target_date.isoformat(),
        price_list_id=resolve_price_list(target_date, rules, default=policy.default_price_list_id),
    )


# =====================================================================
#                  FULL PRICING SNAPSHOT FOR THE FRONTEND
# =====================================================================
@router.get("/halls-pricing")
def halls_pricing(db: Session = Depends(get_db)):
    halls = db.query(Hall).filter(Hall.is_active == True).order_by(Hall.sort_order, Hall.name).all()

    hall_prices = (
        db.query(HallPrice, PriceSet.code)
        .join(PriceSet, HallPrice.price_set_id == PriceSet.id)
        .all()
    )
    prices_by_hall = {}
    for hp, price_set_code in hall_prices:
        prices_by_hall.setdefault(hp.hall_id, {})[price_set_code] = {
            "weekday_10_22": hp.weekday_10_22,
            "weekday_22_00": hp.weekday_22_00 or hp.weekday_10_22,
            "fri_sat": hp.fri_sat_price,
            "sun": hp.sun_price,
            "cleaning_up_to_30": hp.cleaning_up_to_30,
            "cleaning_over_30": hp.cleaning_over_30,
            "after_hours_fee": hp.after_hours_fee,
            "min_hours": hp.min_hours,
            "min_hours_saturday": (
                hp.min_hours_saturday if hp.min_hours_saturday is not None else hp.min_hours
            ),
            "food_alcohol_from_hours": hp.allow_food_alcohol_from_hours,
        }

    extras = db.query(Extra).filter(Extra.is_active == True).order_by(Extra.sort_order, Extra.name).all()
    extra_prices = (
        db.query(ExtraPrice, PriceSet.code)
        .join(PriceSet, ExtraPrice.price_set_id == PriceSet.id)
        .all()
    )
    prices_by_extra = {}
    for ep, price_set_code in extra_prices:
        entry = {}
        if ep.base_price is not None:
            entry["base_price"] = ep.base_price
        if ep.additional_unit_price is not None:
            entry["additional_unit_price"] = ep.additional_unit_price
        if ep.unit_description:
            entry["unit_description"] = ep.unit_description
        prices_by_extra.setdefault(ep.extra_id, {})[price_set_code] = entry

    season_rules = (
        db.query(SeasonRule, PriceSet.code)
        .join(PriceSet, SeasonRule.price_set_id == PriceSet.id)
        .order_by(SeasonRule.priority.desc(), SeasonRule.id)
        .all()
    )

    return {
        "halls": [
            {
                "code": h.code,
                "name": h.name,
                "capacity": h.capacity,
                "prices": prices_by_hall.get(h.id, {}),
            }
            for h in halls
        ],
        "extras": {
            e.code: {
                "name": e.name,
                "pricing_type": e.pricing_type,
                "price_sets": prices_by_extra.get(e.id, {}),
            }
            for e in extras
        },
        "season_rules": [
            {
                "price_set_code": code,
                "start_date": rule.start_date.isoformat(),
                "end_date": rule.end_date.isoformat(),
                "days_of_week": sorted(PricingSeasonRule.parse_mask(rule.days_of_week_mask)),
                "priority": rule.priority,
            }
            for rule, code in season_rules
        ],
    }
