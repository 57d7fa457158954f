from venue_booking.models.booking import Booking
from venue_booking.models.extra import Extra, ExtraPrice
from venue_booking.models.hall import Hall
from venue_booking.models.hall_price import HallPrice
from venue_booking.models.price_set import PriceSet
from venue_booking.models.season_rule import SeasonRule

__all__ = ["Booking", "Extra", "ExtraPrice", "Hall", "HallPrice", "PriceSet", "SeasonRule"]
