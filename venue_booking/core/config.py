import os
from datetime import datetime, time

from dotenv import load_dotenv

from venue_booking.pricing.policy import OperatingWindow, PricingPolicy
from venue_booking.pricing.types import DayCategory

# Load environment variables (.env)
load_dotenv()


def _time_env(name: str, default: str) -> time:
    return datetime.strptime(os.getenv(name, default), "%H:%M").time()


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./venue_booking.db")

    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-me")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "720"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    TELEGRAM_BOT_TOKEN: str | None = os.getenv("TELEGRAM_BOT_TOKEN") or None
    TELEGRAM_CHAT_ID: str | None = os.getenv("TELEGRAM_CHAT_ID") or None

    # -------- PRICING POLICY --------
    PRICING_FRIDAY_EVENING_START: time = _time_env("PRICING_FRIDAY_EVENING_START", "17:00")
    PRICING_LATE_WEEKDAY_RATE_FROM: time = _time_env("PRICING_LATE_WEEKDAY_RATE_FROM", "22:00")
    PRICING_AFTER_HOURS_START: time = _time_env("PRICING_AFTER_HOURS_START", "22:00")
    PRICING_AFTER_HOURS_END: time = _time_env("PRICING_AFTER_HOURS_END", "10:00")
    PRICING_CLEANING_GUEST_THRESHOLD: int = int(os.getenv("PRICING_CLEANING_GUEST_THRESHOLD", "30"))
    PRICING_DEFAULT_PRICE_LIST: str = os.getenv("PRICING_DEFAULT_PRICE_LIST", "standard")
    PRICING_DAY_ROLLOVER: time = _time_env("PRICING_DAY_ROLLOVER", "00:00")


settings = Settings()


def get_pricing_policy() -> PricingPolicy:
    # the surcharged night band is the complement of the normal window
    window = OperatingWindow(
        opens=settings.PRICING_AFTER_HOURS_END,
        closes=settings.PRICING_AFTER_HOURS_START,
    )
    return PricingPolicy(
        friday_evening_start=settings.PRICING_FRIDAY_EVENING_START,
        late_weekday_rate_from=settings.PRICING_LATE_WEEKDAY_RATE_FROM,
        after_hours_windows={category: window for category in DayCategory},
        cleaning_guest_threshold=settings.PRICING_CLEANING_GUEST_THRESHOLD,
        default_price_list_id=settings.PRICING_DEFAULT_PRICE_LIST,
        day_rollover=settings.PRICING_DAY_ROLLOVER,
    )
