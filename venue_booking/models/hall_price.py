from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, UniqueConstraint, func
from sqlalchemy.orm import relationship

from venue_booking.db.session import Base


class HallPrice(Base):
    __tablename__ = "hall_prices"
    __table_args__ = (UniqueConstraint("hall_id", "price_set_id", name="uq_hall_price_set"),)

    id = Column(Integer, primary_key=True, index=True)
    hall_id = Column(Integer, ForeignKey("halls.id", ondelete="CASCADE"), nullable=False)
    price_set_id = Column(Integer, ForeignKey("price_sets.id", ondelete="CASCADE"), nullable=False)

    # Hourly rates
    weekday_10_22 = Column(Float, nullable=False)
    weekday_22_00 = Column(Float, nullable=False)
    fri_sat_price = Column(Float, nullable=False)
    sun_price = Column(Float, nullable=False)

    # Fees
    cleaning_up_to_30 = Column(Float, nullable=False)
    cleaning_over_30 = Column(Float, nullable=False)
    after_hours_fee = Column(Float, nullable=False, default=0.0)

    # Policy
    min_hours = Column(Float, nullable=False, default=2)
    min_hours_saturday = Column(Float, nullable=True)
    allow_food_alcohol_from_hours = Column(Float, nullable=False, default=2)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    hall = relationship("Hall", back_populates="prices")
    price_set = relationship("PriceSet", back_populates="hall_prices")
