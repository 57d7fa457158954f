from pydantic import BaseModel, ConfigDict, Field


class HallPriceCreate(BaseModel):
    hall_id: int
    price_set_id: int

    weekday_10_22: float = Field(ge=0)
    weekday_22_00: float = Field(ge=0)
    fri_sat_price: float = Field(ge=0)
    sun_price: float = Field(ge=0)

    cleaning_up_to_30: float = Field(ge=0)
    cleaning_over_30: float = Field(ge=0)
    after_hours_fee: float = Field(default=0, ge=0)

    min_hours: float = Field(default=2, ge=0)
    min_hours_saturday: float | None = Field(default=None, ge=0)
    allow_food_alcohol_from_hours: float = Field(default=2, ge=0)


class HallPriceOut(HallPriceCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    hall_code: str | None = None
    price_set_code: str | None = None
