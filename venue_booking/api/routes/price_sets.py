from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from venue_booking.core.auth_utils import require_admin
from venue_booking.core.config import settings
from venue_booking.db.session import get_db
from venue_booking.models.price_set import PriceSet
from venue_booking.schemas.price_set import PriceSetCreate, PriceSetOut

router = APIRouter(prefix="/price-sets", tags=["Price Sets"])


def get_price_set_or_404(price_set_id: int, db: Session) -> PriceSet:
    price_set = db.query(PriceSet).filter(PriceSet.id == price_set_id).first()
    if not price_set:
        raise HTTPException(status_code=404, detail="Price set not found")
    return price_set


@router.post("/", response_model=PriceSetOut, status_code=201)
def create_price_set(data: PriceSetCreate, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    if db.query(PriceSet).filter(PriceSet.code == data.code).first():
        raise HTTPException(status_code=400, detail="Price set with this code already exists")

    price_set = PriceSet(code=data.code, name=data.name, description=data.description)
    db.add(price_set)
    db.commit()
    db.refresh(price_set)

    return price_set


@router.put("/{price_set_id}", response_model=PriceSetOut)
def edit_price_set(price_set_id: int, data: PriceSetCreate, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    price_set = get_price_set_or_404(price_set_id, db)

    if price_set.code == settings.PRICING_DEFAULT_PRICE_LIST and data.code != price_set.code:
        raise HTTPException(status_code=400, detail="Default price set code cannot be changed")

    duplicate = (
        db.query(PriceSet)
        .filter(PriceSet.code == data.code, PriceSet.id != price_set_id)
        .first()
    )
    if duplicate:
        raise HTTPException(status_code=400, detail="Price set with this code already exists")

    price_set.code = data.code
    price_set.name = data.name
    price_set.description = data.description
    db.commit()
    db.refresh(price_set)

    return price_set


@router.delete("/{price_set_id}")
def delete_price_set(price_set_id: int, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    price_set = get_price_set_or_404(price_set_id, db)

    if price_set.code == settings.PRICING_DEFAULT_PRICE_LIST:
        raise HTTPException(status_code=400, detail="Default price set cannot be deleted")

    # hall prices, extra prices and season rules go with it
    db.delete(price_set)
    db.commit()

    return {"message": "Price set deleted successfully"}


@router.get("/", response_model=list[PriceSetOut])
def list_price_sets(db: Session = Depends(get_db)):
    return db.query(PriceSet).order_by(PriceSet.code).all()


@router.get("/{price_set_id}", response_model=PriceSetOut)
def get_price_set(price_set_id: int, db: Session = Depends(get_db)):
    return get_price_set_or_404(price_set_id, db)
