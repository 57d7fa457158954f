from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from venue_booking.core.auth_utils import require_admin
from venue_booking.db.session import get_db
from venue_booking.models.extra import Extra
from venue_booking.schemas.extra import ExtraCreate, ExtraOut

router = APIRouter(prefix="/extras", tags=["Extras"])


def get_extra_or_404(extra_id: int, db: Session) -> Extra:
    extra = db.query(Extra).filter(Extra.id == extra_id).first()
    if not extra:
        raise HTTPException(status_code=404, detail="Extra service not found")
    return extra


@router.post("/", response_model=ExtraOut, status_code=201)
def create_extra(data: ExtraCreate, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    if db.query(Extra).filter(Extra.code == data.code).first():
        raise HTTPException(status_code=400, detail="Extra service with this code already exists")

    extra = Extra(**data.model_dump())
    db.add(extra)
    db.commit()
    db.refresh(extra)

    return extra


@router.put("/{extra_id}", response_model=ExtraOut)
def edit_extra(extra_id: int, data: ExtraCreate, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    extra = get_extra_or_404(extra_id, db)

    duplicate = db.query(Extra).filter(Extra.code == data.code, Extra.id != extra_id).first()
    if duplicate:
        raise HTTPException(status_code=400, detail="Extra service with this code already exists")

    for field, value in data.model_dump().items():
        setattr(extra, field, value)

    db.commit()
    db.refresh(extra)

    return extra


@router.delete("/{extra_id}")
def delete_extra(extra_id: int, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    extra = get_extra_or_404(extra_id, db)
    extra.is_active = False
    db.commit()

    return {"message": "Extra service deactivated successfully"}


@router.get("/", response_model=list[ExtraOut])
def list_extras(db: Session = Depends(get_db), include_inactive: bool = False):
    query = db.query(Extra)

    if not include_inactive:
        query = query.filter(Extra.is_active == True)

    return query.order_by(Extra.sort_order, Extra.name).all()


@router.get("/{extra_id}", response_model=ExtraOut)
def get_extra(extra_id: int, db: Session = Depends(get_db)):
    return get_extra_or_404(extra_id, db)
