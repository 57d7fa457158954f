from datetime import date

from venue_booking.models import SeasonRule

from tests.conftest import SATURDAY, TUESDAY


def quote_payload(**overrides):
    payload = {
        "hall_id": "armaloft",
        "date": TUESDAY.isoformat(),
        "start_time": "12:00",
        "end_time": "16:00",
        "guests_count": 25,
        "extra_service_ids": [],
        "food_alcohol": False,
    }
    payload.update(overrides)
    return payload


# ---------------- CALCULATE ----------------
def test_calculate_standard_quote(client, seeded):
    res = client.post("/pricing/calculate", json=quote_payload(extra_service_ids=["ice"]))

    assert res.status_code == 200
    body = res.json()
    assert body["valid"] is True
    assert body["resolved_price_list_id"] == "standard"
    assert body["day_category"] == "weekday"
    assert body["base_cost"] == 12000
    assert body["cleaning_cost"] == 2000
    assert body["add_on_cost"] == 1500
    assert body["total"] == 15500
    assert body["add_ons"] == [{"add_on_id": "ice", "name": "Ice", "quantity": 1, "cost": 1500}]
    assert body["warnings"] == []


def test_calculate_december_quote(client, seeded):
    res = client.post("/pricing/calculate", json=quote_payload(date="2025-12-09"))

    body = res.json()
    assert body["resolved_price_list_id"] == "december"
    assert body["base_price"] == 3500
    assert body["total"] == 16000


def test_policy_violation_is_invalid_quote(client, seeded):
    res = client.post(
        "/pricing/calculate",
        json=quote_payload(date=SATURDAY.isoformat(), start_time="12:00", end_time="14:00"),
    )

    assert res.status_code == 200
    body = res.json()
    assert body["valid"] is False
    assert body["code"] == "PolicyError"
    assert body["error"] == "minimum rental is 3 hours"


def test_food_alcohol_too_short(client, seeded):
    res = client.post(
        "/pricing/calculate",
        json=quote_payload(start_time="12:00", end_time="14:00", food_alcohol=True),
    )

    body = res.json()
    assert body["valid"] is False
    assert body["code"] == "PolicyError"


def test_missing_fields_return_400(client, seeded):
    res = client.post("/pricing/calculate", json={"hall_id": "armaloft"})

    assert res.status_code == 400
    body = res.json()
    assert body["valid"] is False
    assert body["code"] == "ValidationError"
    assert set(body["details"]["fields"]) == {"date", "start_time", "end_time", "guests_count"}


def test_malformed_time_returns_400(client, seeded):
    res = client.post("/pricing/calculate", json=quote_payload(start_time="25:99"))
    assert res.status_code == 400
    assert res.json()["code"] == "ValidationError"


def test_unknown_hall_returns_404(client, seeded):
    res = client.post("/pricing/calculate", json=quote_payload(hall_id="nowhere"))

    assert res.status_code == 404
    assert res.json()["code"] == "NotFoundError"


# ---------------- PRICE LIST ----------------
def test_price_list_for_date(client, seeded):
    assert client.get("/pricing/price-list", params={"date_str": "2025-12-09"}).json() == {
        "date": "2025-12-09",
        "price_list_id": "december",
    }
    assert client.get("/pricing/price-list", params={"date_str": "2025-11-04"}).json()[
        "price_list_id"
    ] == "standard"


def test_price_list_bad_date(client, seeded):
    res = client.get("/pricing/price-list", params={"date_str": "09.12.2025"})
    assert res.status_code == 400


# ---------------- SNAPSHOT ----------------
def test_halls_pricing_snapshot(client, seeded):
    body = client.get("/pricing/halls-pricing").json()

    hall = body["halls"][0]
    assert hall["code"] == "armaloft"
    assert set(hall["prices"]) == {"standard", "december"}
    assert hall["prices"]["december"]["min_hours_saturday"] == 3
    assert hall["prices"]["standard"]["min_hours_saturday"] == 3

    assert list(body["extras"]) == ["ice", "servicing", "hookah"]
    assert body["extras"]["hookah"]["price_sets"]["standard"] == {
        "base_price": 2500,
        "additional_unit_price": 2200,
    }

    assert body["season_rules"] == [{
        "price_set_code": "december",
        "start_date": "2025-12-08",
        "end_date": "2025-12-31",
        "days_of_week": [0, 1, 2, 3, 4, 5, 6],
        "priority": 10,
    }]


def test_snapshot_parses_stored_mask(client, seeded, db):
    db.add(SeasonRule(
        price_set_id=seeded["standard_id"],
        start_date=date(2026, 1, 1),
        end_date=date(2026, 1, 10),
        days_of_week_mask=" 6, 0,,x,6",
        priority=1,
    ))
    db.commit()

    rules = client.get("/pricing/halls-pricing").json()["season_rules"]
    assert rules[1]["days_of_week"] == [0, 6]


def test_calculate_over_capacity(client, seeded):
    res = client.post("/pricing/calculate", json=quote_payload(guests_count=41))

    assert res.status_code == 200
    body = res.json()
    assert body["valid"] is False
    assert body["code"] == "PolicyError"
    assert body["error"] == "hall holds at most 40 guests"
