from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from venue_booking.db.session import Base


class PriceSet(Base):
    __tablename__ = "price_sets"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(String)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    hall_prices = relationship("HallPrice", back_populates="price_set", cascade="all, delete")
    extra_prices = relationship("ExtraPrice", back_populates="price_set", cascade="all, delete")
    season_rules = relationship("SeasonRule", back_populates="price_set", cascade="all, delete")
