import logging

from sqlalchemy.orm import Session

from venue_booking import models  # noqa: F401  registers every table on Base
from venue_booking.core.config import settings
from venue_booking.db.session import Base, engine
from venue_booking.models.price_set import PriceSet

logger = logging.getLogger(__name__)


def init_db(bind=None):
    bind = bind or engine
    Base.metadata.create_all(bind=bind)

    with Session(bind=bind) as db:
        code = settings.PRICING_DEFAULT_PRICE_LIST
        if not db.query(PriceSet).filter(PriceSet.code == code).first():
            db.add(PriceSet(code=code, name="Standard", description="Default price list"))
            db.commit()
            logger.info("Created default price set %s", code)
