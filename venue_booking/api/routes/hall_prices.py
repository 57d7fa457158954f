from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from venue_booking.core.auth_utils import require_admin
from venue_booking.db.session import get_db
from venue_booking.models.hall import Hall
from venue_booking.models.hall_price import HallPrice
from venue_booking.models.price_set import PriceSet
from venue_booking.schemas.hall_price import HallPriceCreate, HallPriceOut

router = APIRouter(prefix="/hall-prices", tags=["Hall Prices"])

PRICE_FIELDS = (
    "weekday_10_22",
    "weekday_22_00",
    "fri_sat_price",
    "sun_price",
    "cleaning_up_to_30",
    "cleaning_over_30",
    "after_hours_fee",
    "min_hours",
    "min_hours_saturday",
    "allow_food_alcohol_from_hours",
)


def to_out(hp: HallPrice) -> HallPriceOut:
    out = HallPriceOut.model_validate(hp)
    out.hall_code = hp.hall.code if hp.hall else None
    out.price_set_code = hp.price_set.code if hp.price_set else None
    return out


def check_references(data: HallPriceCreate, db: Session):
    if not db.query(Hall).filter(Hall.id == data.hall_id).first():
        raise HTTPException(status_code=404, detail="Hall not found")
    if not db.query(PriceSet).filter(PriceSet.id == data.price_set_id).first():
        raise HTTPException(status_code=404, detail="Price set not found")


def get_hall_price_or_404(hall_price_id: int, db: Session) -> HallPrice:
    hp = db.query(HallPrice).filter(HallPrice.id == hall_price_id).first()
    if not hp:
        raise HTTPException(status_code=404, detail="Hall price not found")
    return hp


# =====================================================================
#                        CREATE HALL PRICE
# =====================================================================
@router.post("/", response_model=HallPriceOut, status_code=201)
def create_hall_price(data: HallPriceCreate, token: str, db: Session = Depends(get_db)):
    require_admin(token)
    check_references(data, db)

    exists = (
        db.query(HallPrice)
        .filter(HallPrice.hall_id == data.hall_id, HallPrice.price_set_id == data.price_set_id)
        .first()
    )
    if exists:
        raise HTTPException(status_code=400, detail="Price for this hall and price set already exists")

    hp = HallPrice(hall_id=data.hall_id, price_set_id=data.price_set_id)
    for field in PRICE_FIELDS:
        setattr(hp, field, getattr(data, field))

    db.add(hp)
    db.commit()
    db.refresh(hp)

    return to_out(hp)


# =====================================================================
#                         EDIT HALL PRICE
# =====================================================================
@router.put("/{hall_price_id}", response_model=HallPriceOut)
def edit_hall_price(hall_price_id: int, data: HallPriceCreate, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    hp = get_hall_price_or_404(hall_price_id, db)
    check_references(data, db)

    duplicate = (
        db.query(HallPrice)
        .filter(
            HallPrice.hall_id == data.hall_id,
            HallPrice.price_set_id == data.price_set_id,
            HallPrice.id != hall_price_id,
        )
        .first()
    )
    if duplicate:
        raise HTTPException(status_code=400, detail="Price for this hall and price set already exists")

    hp.hall_id = data.hall_id
    hp.price_set_id = data.price_set_id
    for field in PRICE_FIELDS:
        setattr(hp, field, getattr(data, field))

    db.commit()
    db.refresh(hp)

    return to_out(hp)


@router.delete("/{hall_price_id}")
def delete_hall_price(hall_price_id: int, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    hp = get_hall_price_or_404(hall_price_id, db)
    db.delete(hp)
    db.commit()

    return {"message": "Hall price deleted successfully"}


# =====================================================================
#                         LIST HALL PRICES
# =====================================================================
@router.get("/", response_model=list[HallPriceOut])
def list_hall_prices(
    db: Session = Depends(get_db),
    hall_id: int | None = None,
    price_set_id: int | None = None,
):
    query = db.query(HallPrice)

    if hall_id:
        query = query.filter(HallPrice.hall_id == hall_id)

    if price_set_id:
        query = query.filter(HallPrice.price_set_id == price_set_id)

    return [to_out(hp) for hp in query.order_by(HallPrice.hall_id, HallPrice.price_set_id).all()]


@router.get("/{hall_price_id}", response_model=HallPriceOut)
def get_hall_price(hall_price_id: int, db: Session = Depends(get_db)):
    return to_out(get_hall_price_or_404(hall_price_id, db))
