from sqlalchemy import CheckConstraint, Column, Date, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from venue_booking.db.session import Base


class SeasonRule(Base):
    __tablename__ = "season_rules"
    __table_args__ = (CheckConstraint("start_date <= end_date", name="ck_season_rule_dates"),)

    id = Column(Integer, primary_key=True, index=True)
    price_set_id = Column(Integer, ForeignKey("price_sets.id", ondelete="CASCADE"), nullable=False)

    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    # comma separated days, 0 = Sunday
    days_of_week_mask = Column(String, nullable=False)
    priority = Column(Integer, nullable=False, default=1)
    description = Column(String)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    price_set = relationship("PriceSet", back_populates="season_rules")
