from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from venue_booking.core.auth_utils import require_admin
from venue_booking.db.session import get_db
from venue_booking.models.hall import Hall
from venue_booking.schemas.hall import HallCreate, HallOut

router = APIRouter(prefix="/halls", tags=["Halls"])


def get_hall_or_404(hall_id: int, db: Session) -> Hall:
    hall = db.query(Hall).filter(Hall.id == hall_id).first()
    if not hall:
        raise HTTPException(status_code=404, detail="Hall not found")
    return hall


# =====================================================================
#                           CREATE HALL
# =====================================================================
@router.post("/", response_model=HallOut, status_code=201)
def create_hall(data: HallCreate, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    if db.query(Hall).filter(Hall.code == data.code).first():
        raise HTTPException(status_code=400, detail="Hall with this code already exists")

    hall = Hall(
        code=data.code,
        name=data.name,
        capacity=data.capacity,
        is_active=data.is_active,
        sort_order=data.sort_order,
    )

    db.add(hall)
    db.commit()
    db.refresh(hall)

    return hall


# =====================================================================
#                           EDIT HALL
# =====================================================================
@router.put("/{hall_id}", response_model=HallOut)
def edit_hall(hall_id: int, data: HallCreate, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    hall = get_hall_or_404(hall_id, db)

    duplicate = db.query(Hall).filter(Hall.code == data.code, Hall.id != hall_id).first()
    if duplicate:
        raise HTTPException(status_code=400, detail="Hall with this code already exists")

    hall.code = data.code
    hall.name = data.name
    hall.capacity = data.capacity
    hall.is_active = data.is_active
    hall.sort_order = data.sort_order

    db.commit()
    db.refresh(hall)

    return hall


# =====================================================================
#                       DELETE (DEACTIVATE)
# =====================================================================
@router.delete("/{hall_id}")
def delete_hall(hall_id: int, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    hall = get_hall_or_404(hall_id, db)
    hall.is_active = False
    db.commit()

    return {"message": "Hall deactivated successfully"}


# =====================================================================
#                           LIST HALLS
# =====================================================================
@router.get("/", response_model=list[HallOut])
def list_halls(
    db: Session = Depends(get_db),
    include_inactive: bool = False,
    min_capacity: int | None = None,
):
    query = db.query(Hall)

    if not include_inactive:
        query = query.filter(Hall.is_active == True)

    if min_capacity:
        query = query.filter(Hall.capacity >= min_capacity)

    return query.order_by(Hall.sort_order, Hall.name).all()


# =====================================================================
#                           HALL DETAILS
# =====================================================================
@router.get("/{hall_id}", response_model=HallOut)
def get_hall(hall_id: int, db: Session = Depends(get_db)):
    return get_hall_or_404(hall_id, db)
