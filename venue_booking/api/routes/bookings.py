import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from venue_booking.api.routes.pricing import quote_out, to_quote_request
from venue_booking.core.auth_utils import require_admin
from venue_booking.core.config import get_pricing_policy
from venue_booking.db.session import get_db
from venue_booking.models.booking import Booking
from venue_booking.models.hall import Hall
from venue_booking.pricing import Quote, calculate
from venue_booking.pricing.calculator import parse_date
from venue_booking.pricing.schedule import parse_time
from venue_booking.repositories.rate_table import SqlAlchemyRateTableStore
from venue_booking.schemas.booking import (
    BookingCreate,
    BookingCreated,
    BookingOut,
    BookingStatusUpdate,
)
from venue_booking.utils.telegram_client import telegram_notifier

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["Bookings"])


def booking_out(booking: Booking) -> BookingOut:
    return BookingOut(
        id=booking.id,
        hall_code=booking.hall.code,
        booking_date=booking.booking_date,
        start_time=booking.start_time,
        end_time=booking.end_time,
        guests_count=booking.guests_count,
        extra_service_ids=[c for c in (booking.extra_service_ids or "").split(",") if c],
        food_alcohol=booking.food_alcohol,
        customer_name=booking.customer_name,
        customer_phone=booking.customer_phone,
        customer_email=booking.customer_email,
        comment=booking.comment,
        price_list_code=booking.price_list_code,
        total_price=booking.total_price,
        status=booking.status,
        notification_sent=booking.notification_sent,
        created_at=booking.created_at,
    )


def _amount(value: float) -> str:
    return f"{value:.0f}" if float(value).is_integer() else f"{value:.2f}"


def format_notification(booking: Booking, hall: Hall, quote: Quote) -> str:
    lines = [
        f"New booking #{booking.id}",
        f"Hall: {hall.name}",
        f"Date: {booking.booking_date.isoformat()} "
        f"{booking.start_time.strftime('%H:%M')}-{booking.end_time.strftime('%H:%M')}",
        f"Guests: {booking.guests_count}",
        f"Name: {booking.customer_name}",
        f"Phone: {booking.customer_phone}",
    ]
    if booking.customer_email:
        lines.append(f"Email: {booking.customer_email}")
    if booking.food_alcohol:
        lines.append("Food/alcohol: yes")
    for line in quote.add_ons:
        lines.append(f"+ {line.name} x{line.quantity}: {_amount(line.cost)}")
    if booking.comment:
        lines.append(f"Comment: {booking.comment}")
    lines.append(f"Price list: {quote.resolved_price_list_id}")
    lines.append(f"Total: {_amount(quote.total)}")
    return "\n".join(lines)


# =====================================================================
#                            CREATE BOOKING
# =====================================================================
@router.post("/", response_model=BookingCreated, status_code=201)
def create_booking(data: BookingCreate, db: Session = Depends(get_db)):

    # Price is always recalculated server-side
    result = calculate(
        to_quote_request(data), SqlAlchemyRateTableStore(db), get_pricing_policy()
    )
    if not isinstance(result, Quote):
        return JSONResponse(status_code=400, content=quote_out(result).model_dump())

    hall = db.query(Hall).filter(Hall.code == data.hall_id, Hall.is_active == True).first()
    if not hall:
        raise HTTPException(status_code=404, detail="Hall not found")

    booking = Booking(
        hall_id=hall.id,
        booking_date=parse_date(data.date),
        start_time=parse_time(data.start_time, "start_time"),
        end_time=parse_time(data.end_time, "end_time"),
        guests_count=data.guests_count,
        extra_service_ids=",".join(data.extra_service_ids),
        food_alcohol=data.food_alcohol,
        customer_name=data.customer_name,
        customer_phone=data.customer_phone,
        customer_email=data.customer_email,
        comment=data.comment,
        price_list_code=result.resolved_price_list_id,
        total_price=result.total,
        status="new",
        notification_sent=False,
    )

    db.add(booking)
    db.commit()
    db.refresh(booking)
    logger.info("Booking %s created for hall %s, total %s", booking.id, hall.code, result.total)

    # Staff notification never blocks the booking
    if telegram_notifier.send_message(format_notification(booking, hall, result)):
        booking.notification_sent = True
        db.commit()

    return BookingCreated(
        message="Booking created",
        booking_id=booking.id,
        total_price=result.total,
        notification_sent=booking.notification_sent,
        quote=quote_out(result),
    )


# =====================================================================
#                        ADMIN - BOOKINGS LIST
# =====================================================================
@router.get("/", response_model=list[BookingOut])
def list_bookings(
    token: str,
    db: Session = Depends(get_db),
    status: str | None = None,
    hall_id: int | None = None,
):
    require_admin(token)

    query = db.query(Booking)

    if status:
        query = query.filter(Booking.status == status)

    if hall_id:
        query = query.filter(Booking.hall_id == hall_id)

    bookings = query.order_by(Booking.booking_date.desc(), Booking.start_time).all()
    return [booking_out(b) for b in bookings]


@router.get("/{booking_id}", response_model=BookingOut)
def get_booking(booking_id: int, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")

    return booking_out(booking)


# =====================================================================
#                      ADMIN - CHANGE STATUS
# =====================================================================
@router.patch("/{booking_id}/status", response_model=BookingOut)
def update_booking_status(
    booking_id: int,
    data: BookingStatusUpdate,
    token: str,
    db: Session = Depends(get_db),
):
    require_admin(token)

    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")

    booking.status = data.status
    db.commit()
    db.refresh(booking)

    return booking_out(booking)
