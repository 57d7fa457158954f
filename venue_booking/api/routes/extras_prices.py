from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from venue_booking.core.auth_utils import require_admin
from venue_booking.db.session import get_db
from venue_booking.models.extra import Extra, ExtraPrice
from venue_booking.models.price_set import PriceSet
from venue_booking.schemas.extra import ExtraPriceCreate, ExtraPriceOut

router = APIRouter(prefix="/extras-prices", tags=["Extras Prices"])


def to_out(ep: ExtraPrice) -> ExtraPriceOut:
    out = ExtraPriceOut.model_validate(ep)
    out.extra_code = ep.extra.code if ep.extra else None
    out.price_set_code = ep.price_set.code if ep.price_set else None
    return out


def check_references(data: ExtraPriceCreate, db: Session):
    if not db.query(Extra).filter(Extra.id == data.extra_id).first():
        raise HTTPException(status_code=404, detail="Extra service not found")
    if not db.query(PriceSet).filter(PriceSet.id == data.price_set_id).first():
        raise HTTPException(status_code=404, detail="Price set not found")


def get_extra_price_or_404(extra_price_id: int, db: Session) -> ExtraPrice:
    ep = db.query(ExtraPrice).filter(ExtraPrice.id == extra_price_id).first()
    if not ep:
        raise HTTPException(status_code=404, detail="Extra price not found")
    return ep


@router.post("/", response_model=ExtraPriceOut, status_code=201)
def create_extra_price(data: ExtraPriceCreate, token: str, db: Session = Depends(get_db)):
    require_admin(token)
    check_references(data, db)

    exists = (
        db.query(ExtraPrice)
        .filter(ExtraPrice.extra_id == data.extra_id, ExtraPrice.price_set_id == data.price_set_id)
        .first()
    )
    if exists:
        raise HTTPException(status_code=400, detail="Price for this extra and price set already exists")

    ep = ExtraPrice(**data.model_dump())
    db.add(ep)
    db.commit()
    db.refresh(ep)

    return to_out(ep)


@router.put("/{extra_price_id}", response_model=ExtraPriceOut)
def edit_extra_price(extra_price_id: int, data: ExtraPriceCreate, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    ep = get_extra_price_or_404(extra_price_id, db)
    check_references(data, db)

    duplicate = (
        db.query(ExtraPrice)
        .filter(
            ExtraPrice.extra_id == data.extra_id,
            ExtraPrice.price_set_id == data.price_set_id,
            ExtraPrice.id != extra_price_id,
        )
        .first()
    )
    if duplicate:
        raise HTTPException(status_code=400, detail="Price for this extra and price set already exists")

    for field, value in data.model_dump().items():
        setattr(ep, field, value)

    db.commit()
    db.refresh(ep)

    return to_out(ep)


@router.delete("/{extra_price_id}")
def delete_extra_price(extra_price_id: int, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    ep = get_extra_price_or_404(extra_price_id, db)
    db.delete(ep)
    db.commit()

    return {"message": "Extra price deleted successfully"}


@router.get("/", response_model=list[ExtraPriceOut])
def list_extra_prices(
    db: Session = Depends(get_db),
    extra_id: int | None = None,
    price_set_id: int | None = None,
):
    query = db.query(ExtraPrice)

    if extra_id:
        query = query.filter(ExtraPrice.extra_id == extra_id)

    if price_set_id:
        query = query.filter(ExtraPrice.price_set_id == price_set_id)

    return [to_out(ep) for ep in query.order_by(ExtraPrice.extra_id, ExtraPrice.price_set_id).all()]


@router.get("/{extra_price_id}", response_model=ExtraPriceOut)
def get_extra_price(extra_price_id: int, db: Session = Depends(get_db)):
    return to_out(get_extra_price_or_404(extra_price_id, db))
