from datetime import date, datetime, time
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from venue_booking.schemas.pricing import QuoteOut, QuoteRequestIn


class BookingCreate(QuoteRequestIn):
    customer_name: str = Field(min_length=1)
    customer_phone: str = Field(min_length=5)
    customer_email: str | None = None
    comment: str | None = None


class BookingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    hall_code: str
    booking_date: date
    start_time: time
    end_time: time
    guests_count: int
    extra_service_ids: list[str]
    food_alcohol: bool
    customer_name: str
    customer_phone: str
    customer_email: str | None = None
    comment: str | None = None
    price_list_code: str
    total_price: float
    status: str
    notification_sent: bool
    created_at: datetime | None = None


class BookingCreated(BaseModel):
    message: str
    booking_id: int
    total_price: float
    notification_sent: bool
    quote: QuoteOut


class BookingStatusUpdate(BaseModel):
    status: Literal["new", "confirmed", "cancelled"]
