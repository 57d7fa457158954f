from typing import Iterable, Mapping, Protocol

from venue_booking.pricing.types import (
    AddOnCostRecord,
    AddOnService,
    Hall,
    RateRecord,
    SeasonRule,
)


class RateTableStore(Protocol):
    """Read-only view of the rate tables the calculator prices against."""

    def get_rate_record(self, hall_id: str, price_list_id: str) -> RateRecord | None: ...

    def get_season_rules(self) -> list[SeasonRule]: ...

    def get_add_on_cost_record(self, add_on_id: str, price_list_id: str) -> AddOnCostRecord | None: ...

    def list_active_halls(self) -> list[Hall]: ...

    def list_active_add_ons(self) -> list[AddOnService]: ...


class InMemoryRateTableStore:
    """Store over plain mappings keyed by (id, price list id)."""

    def __init__(
        self,
        rates: Mapping | None = None,
        season_rules: Iterable[SeasonRule] = (),
        add_on_costs: Mapping | None = None,
        halls: Iterable[Hall] = (),
        add_ons: Iterable[AddOnService] = (),
    ):
        self._rates = dict(rates or {})
        self._season_rules = tuple(season_rules)
        self._add_on_costs = dict(add_on_costs or {})
        self._halls = tuple(halls)
        self._add_ons = tuple(add_ons)

    def get_rate_record(self, hall_id, price_list_id):
        return self._rates.get((hall_id, price_list_id))

    def get_season_rules(self):
        return list(self._season_rules)

    def get_add_on_cost_record(self, add_on_id, price_list_id):
        return self._add_on_costs.get((add_on_id, price_list_id))

    def list_active_halls(self):
        halls = [h for h in self._halls if h.is_active]
        return sorted(halls, key=lambda h: (h.sort_order, h.name))

    def list_active_add_ons(self):
        return list(self._add_ons)
