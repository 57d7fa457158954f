from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from venue_booking.db.session import Base

PRICING_TYPES = ("fixed", "per_unit", "complex")


class Extra(Base):
    __tablename__ = "extras"
    __table_args__ = (
        CheckConstraint(
            "pricing_type IN ('fixed', 'per_unit', 'complex')", name="ck_extra_pricing_type"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(String)
    pricing_type = Column(String, nullable=False, default="fixed")

    is_active = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    prices = relationship("ExtraPrice", back_populates="extra", cascade="all, delete")


class ExtraPrice(Base):
    __tablename__ = "extras_prices"
    __table_args__ = (UniqueConstraint("extra_id", "price_set_id", name="uq_extra_price_set"),)

    id = Column(Integer, primary_key=True, index=True)
    extra_id = Column(Integer, ForeignKey("extras.id", ondelete="CASCADE"), nullable=False)
    price_set_id = Column(Integer, ForeignKey("price_sets.id", ondelete="CASCADE"), nullable=False)

    base_price = Column(Float, nullable=True)
    additional_unit_price = Column(Float, nullable=True)
    unit_description = Column(String, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    extra = relationship("Extra", back_populates="prices")
    price_set = relationship("PriceSet", back_populates="extra_prices")
