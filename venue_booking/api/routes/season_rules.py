from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from venue_booking.core.auth_utils import require_admin
from venue_booking.db.session import get_db
from venue_booking.models.price_set import PriceSet
from venue_booking.models.season_rule import SeasonRule
from venue_booking.schemas.season_rule import SeasonRuleCreate, SeasonRuleOut

router = APIRouter(prefix="/season-rules", tags=["Season Rules"])


def to_out(rule: SeasonRule) -> SeasonRuleOut:
    out = SeasonRuleOut.model_validate(rule)
    out.price_set_code = rule.price_set.code if rule.price_set else None
    return out


def get_rule_or_404(rule_id: int, db: Session) -> SeasonRule:
    rule = db.query(SeasonRule).filter(SeasonRule.id == rule_id).first()
    if not rule:
        raise HTTPException(status_code=404, detail="Season rule not found")
    return rule


def check_price_set(price_set_id: int, db: Session):
    if not db.query(PriceSet).filter(PriceSet.id == price_set_id).first():
        raise HTTPException(status_code=404, detail="Price set not found")


# =====================================================================
#                        CREATE SEASON RULE
# =====================================================================
@router.post("/", response_model=SeasonRuleOut, status_code=201)
def create_season_rule(data: SeasonRuleCreate, token: str, db: Session = Depends(get_db)):
    require_admin(token)
    check_price_set(data.price_set_id, db)

    rule = SeasonRule(**data.model_dump())
    db.add(rule)
    db.commit()
    db.refresh(rule)

    return to_out(rule)


# =====================================================================
#                         EDIT SEASON RULE
# =====================================================================
@router.put("/{rule_id}", response_model=SeasonRuleOut)
def edit_season_rule(rule_id: int, data: SeasonRuleCreate, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    rule = get_rule_or_404(rule_id, db)
    check_price_set(data.price_set_id, db)

    for field, value in data.model_dump().items():
        setattr(rule, field, value)

    db.commit()
    db.refresh(rule)

    return to_out(rule)


@router.delete("/{rule_id}")
def delete_season_rule(rule_id: int, token: str, db: Session = Depends(get_db)):
    require_admin(token)

    rule = get_rule_or_404(rule_id, db)
    db.delete(rule)
    db.commit()

    return {"message": "Season rule deleted successfully"}


# =====================================================================
#                    LIST RULES (RESOLUTION ORDER)
# =====================================================================
@router.get("/", response_model=list[SeasonRuleOut])
def list_season_rules(db: Session = Depends(get_db)):
    rules = db.query(SeasonRule).order_by(SeasonRule.priority.desc(), SeasonRule.id).all()
    return [to_out(rule) for rule in rules]


@router.get("/{rule_id}", response_model=SeasonRuleOut)
def get_season_rule(rule_id: int, db: Session = Depends(get_db)):
    return to_out(get_rule_or_404(rule_id, db))
