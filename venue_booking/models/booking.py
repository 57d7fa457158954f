from sqlalchemy import Boolean, Column, Date, DateTime, Float, ForeignKey, Integer, String, Time, func
from sqlalchemy.orm import relationship

from venue_booking.db.session import Base

BOOKING_STATUSES = ("new", "confirmed", "cancelled")


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    hall_id = Column(Integer, ForeignKey("halls.id"), nullable=False)

    booking_date = Column(Date, nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    guests_count = Column(Integer, nullable=False)
    # comma separated extra codes, repeated codes are extra units
    extra_service_ids = Column(String, nullable=False, default="")
    food_alcohol = Column(Boolean, nullable=False, default=False)

    customer_name = Column(String, nullable=False)
    customer_phone = Column(String, nullable=False)
    customer_email = Column(String)
    comment = Column(String)

    price_list_code = Column(String, nullable=False)
    total_price = Column(Float, nullable=False)
    status = Column(String, nullable=False, default="new")
    notification_sent = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, server_default=func.now())

    hall = relationship("Hall", back_populates="bookings")
