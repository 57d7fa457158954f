import logging

from sqlalchemy.orm import Session

from venue_booking.models.extra import Extra, ExtraPrice
from venue_booking.models.hall import Hall
from venue_booking.models.hall_price import HallPrice
from venue_booking.models.price_set import PriceSet
from venue_booking.models.season_rule import SeasonRule
from venue_booking.pricing import types

logger = logging.getLogger(__name__)


def to_rate_record(row: HallPrice) -> types.RateRecord:
    return types.RateRecord(
        weekday_rate_10_22=row.weekday_10_22,
        weekday_rate_22_00=row.weekday_22_00,
        friday_saturday_rate=row.fri_sat_price,
        sunday_rate=row.sun_price,
        cleaning_fee_up_to_30=row.cleaning_up_to_30,
        cleaning_fee_over_30=row.cleaning_over_30,
        after_hours_fee=row.after_hours_fee or 0,
        minimum_hours=row.min_hours if row.min_hours is not None else 2,
        minimum_hours_saturday=row.min_hours_saturday,
        food_alcohol_min_hours=(
            row.allow_food_alcohol_from_hours
            if row.allow_food_alcohol_from_hours is not None
            else 2
        ),
    )


def to_add_on_cost_record(row: ExtraPrice) -> types.AddOnCostRecord:
    return types.AddOnCostRecord(
        base_price=row.base_price,
        additional_unit_price=row.additional_unit_price,
        unit_description=row.unit_description,
    )


class SqlAlchemyRateTableStore:
    """Rate tables read from the database. Halls, add-ons and price lists are addressed by code."""

    def __init__(self, db: Session):
        self.db = db

    def get_rate_record(self, hall_id, price_list_id):
        row = (
            self.db.query(HallPrice)
            .join(Hall, HallPrice.hall_id == Hall.id)
            .join(PriceSet, HallPrice.price_set_id == PriceSet.id)
            .filter(Hall.code == hall_id, Hall.is_active == True, PriceSet.code == price_list_id)
            .first()
        )
        return to_rate_record(row) if row else None

    def get_season_rules(self):
        rows = (
            self.db.query(SeasonRule, PriceSet.code)
            .join(PriceSet, SeasonRule.price_set_id == PriceSet.id)
            .order_by(SeasonRule.priority.desc(), SeasonRule.id)
            .all()
        )

        rules = []
        for rule, code in rows:
            try:
                rules.append(
                    types.SeasonRule(
                        price_list_id=code,
                        start_date=rule.start_date,
                        end_date=rule.end_date,
                        days_of_week=types.SeasonRule.parse_mask(rule.days_of_week_mask),
                        priority=rule.priority,
                    )
                )
            except ValueError as exc:
                logger.warning("Skipping season rule %s: %s", rule.id, exc)
        return rules

    def get_add_on_cost_record(self, add_on_id, price_list_id):
        row = (
            self.db.query(ExtraPrice)
            .join(Extra, ExtraPrice.extra_id == Extra.id)
            .join(PriceSet, ExtraPrice.price_set_id == PriceSet.id)
            .filter(Extra.code == add_on_id, PriceSet.code == price_list_id)
            .first()
        )
        return to_add_on_cost_record(row) if row else None

    def list_active_halls(self):
        halls = (
            self.db.query(Hall)
            .filter(Hall.is_active == True)
            .order_by(Hall.sort_order, Hall.name)
            .all()
        )
        return [
            types.Hall(
                id=h.code,
                name=h.name,
                capacity=h.capacity,
                is_active=h.is_active,
                sort_order=h.sort_order,
            )
            for h in halls
        ]

    def list_active_add_ons(self):
        extras = (
            self.db.query(Extra)
            .filter(Extra.is_active == True)
            .order_by(Extra.sort_order, Extra.name)
            .all()
        )
        return [
            types.AddOnService(id=e.code, name=e.name, pricing_type=types.PricingType(e.pricing_type))
            for e in extras
        ]
