from datetime import time

import pytest
from fastapi import HTTPException

from venue_booking.core import config
from venue_booking.core.auth_utils import create_access_token, decode_token, require_admin
from venue_booking.pricing import DayCategory


def test_policy_from_default_settings():
    policy = config.get_pricing_policy()

    assert policy.friday_evening_start == time(17, 0)
    assert policy.cleaning_guest_threshold == 30
    assert policy.default_price_list_id == "standard"
    for category in DayCategory:
        window = policy.window_for(category)
        assert (window.opens, window.closes) == (time(10, 0), time(22, 0))


def test_policy_follows_settings(monkeypatch):
    monkeypatch.setattr(config.settings, "PRICING_AFTER_HOURS_START", time(23, 0))
    monkeypatch.setattr(config.settings, "PRICING_CLEANING_GUEST_THRESHOLD", 40)

    policy = config.get_pricing_policy()

    assert policy.window_for(DayCategory.SUNDAY).closes == time(23, 0)
    assert policy.cleaning_guest_threshold == 40


def test_token_round_trip():
    token = create_access_token("admin@example.com")
    assert decode_token(token)["role"] == "admin"
    assert require_admin(token) == "admin@example.com"


def test_expired_token_rejected():
    token = create_access_token("admin@example.com", expires_minutes=-1)

    with pytest.raises(HTTPException) as exc:
        decode_token(token)
    assert exc.value.detail == "Token expired"
