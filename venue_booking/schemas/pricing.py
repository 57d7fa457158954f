from pydantic import BaseModel, Field


class QuoteRequestIn(BaseModel):
    hall_id: str | None = None
    date: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    guests_count: int | None = None
    extra_service_ids: list[str] = Field(default_factory=list)
    food_alcohol: bool = False


class AddOnLineOut(BaseModel):
    add_on_id: str
    name: str
    quantity: int
    cost: float


class QuoteOut(BaseModel):
    valid: bool = True
    base_price: float
    billable_hours: float
    base_cost: float
    cleaning_cost: float
    after_hours_fee: float
    add_on_cost: float
    total: float
    day_category: str
    resolved_price_list_id: str
    add_ons: list[AddOnLineOut] = []
    warnings: list[str] = []


class QuoteFailureOut(BaseModel):
    valid: bool = False
    error: str
    code: str
    details: dict = {}


class PriceListOut(BaseModel):
    date: str
    price_list_id: str
