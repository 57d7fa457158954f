from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from venue_booking.api.routes import bookings
from venue_booking.core.auth_utils import create_access_token
from venue_booking.db.init_db import init_db
from venue_booking.db.session import Base, get_db
from venue_booking.main import app
from venue_booking.models import Extra, ExtraPrice, Hall, HallPrice, PriceSet, SeasonRule
from venue_booking.pricing import (
    AddOnCostRecord,
    AddOnService,
    Hall as HallSnapshot,
    InMemoryRateTableStore,
    PricingType,
    RateRecord,
)

TUESDAY = date(2025, 11, 4)
FRIDAY = date(2025, 11, 7)
SATURDAY = date(2025, 11, 8)
SUNDAY = date(2025, 11, 9)


def make_rate(**overrides) -> RateRecord:
    values = dict(
        weekday_rate_10_22=3000,
        weekday_rate_22_00=3500,
        friday_saturday_rate=4500,
        sunday_rate=4000,
        cleaning_fee_up_to_30=2000,
        cleaning_fee_over_30=2500,
        after_hours_fee=400,
        minimum_hours=2,
        minimum_hours_saturday=None,
        food_alcohol_min_hours=2,
    )
    values.update(overrides)
    return RateRecord(**values)


@pytest.fixture
def store():
    return InMemoryRateTableStore(
        rates={("armaloft", "standard"): make_rate()},
        add_on_costs={
            ("ice", "standard"): AddOnCostRecord(base_price=1500),
            ("servicing", "standard"): AddOnCostRecord(
                base_price=500, unit_description="за каждые 10 человек"
            ),
            ("hookah", "standard"): AddOnCostRecord(base_price=2500, additional_unit_price=2200),
        },
        halls=[HallSnapshot(id="armaloft", name="Arma Loft", capacity=40)],
        add_ons=[
            AddOnService(id="ice", name="Ice", pricing_type=PricingType.FIXED),
            AddOnService(id="servicing", name="Table setting", pricing_type=PricingType.PER_UNIT),
            AddOnService(id="hookah", name="Hookah", pricing_type=PricingType.COMPLEX),
        ],
    )


# ---------------- DATABASE ----------------
@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


class FakeNotifier:
    def __init__(self, succeed=True):
        self.succeed = succeed
        self.messages = []

    def send_message(self, text):
        self.messages.append(text)
        return self.succeed


@pytest.fixture
def notifier(monkeypatch):
    fake = FakeNotifier()
    monkeypatch.setattr(bookings, "telegram_notifier", fake)
    return fake


@pytest.fixture
def client(session_factory, notifier):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_token():
    return create_access_token("admin@example.com", role="admin")


@pytest.fixture
def seeded(db):
    """Arma Loft with standard and december rates, three extras, one december rule."""
    standard = db.query(PriceSet).filter(PriceSet.code == "standard").one()
    december = PriceSet(code="december", name="December")
    hall = Hall(code="armaloft", name="Arma Loft", capacity=40, sort_order=1)
    db.add_all([december, hall])
    db.flush()

    db.add_all([
        HallPrice(
            hall_id=hall.id, price_set_id=standard.id,
            weekday_10_22=3000, weekday_22_00=3500, fri_sat_price=4500, sun_price=4000,
            cleaning_up_to_30=2000, cleaning_over_30=2500, after_hours_fee=400,
            min_hours=2, min_hours_saturday=3, allow_food_alcohol_from_hours=3,
        ),
        HallPrice(
            hall_id=hall.id, price_set_id=december.id,
            weekday_10_22=3500, weekday_22_00=3500, fri_sat_price=5000, sun_price=4500,
            cleaning_up_to_30=2000, cleaning_over_30=2500, after_hours_fee=400,
            min_hours=3, min_hours_saturday=None, allow_food_alcohol_from_hours=3,
        ),
    ])

    ice = Extra(code="ice", name="Ice", pricing_type="fixed", sort_order=1)
    servicing = Extra(code="servicing", name="Table setting", pricing_type="per_unit", sort_order=2)
    hookah = Extra(code="hookah", name="Hookah", pricing_type="complex", sort_order=3)
    db.add_all([ice, servicing, hookah])
    db.flush()

    db.add_all([
        ExtraPrice(extra_id=ice.id, price_set_id=standard.id, base_price=1500),
        ExtraPrice(
            extra_id=servicing.id, price_set_id=standard.id,
            base_price=500, unit_description="за каждые 10 человек",
        ),
        ExtraPrice(
            extra_id=hookah.id, price_set_id=standard.id,
            base_price=2500, additional_unit_price=2200,
        ),
        ExtraPrice(extra_id=ice.id, price_set_id=december.id, base_price=2000),
    ])

    db.add(SeasonRule(
        price_set_id=december.id,
        start_date=date(2025, 12, 8),
        end_date=date(2025, 12, 31),
        days_of_week_mask="0,1,2,3,4,5,6",
        priority=10,
        description="December",
    ))
    db.commit()

    return {
        "hall_id": hall.id,
        "standard_id": standard.id,
        "december_id": december.id,
        "ice_id": ice.id,
    }
