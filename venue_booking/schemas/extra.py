from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ExtraCreate(BaseModel):
    code: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str | None = None
    pricing_type: Literal["fixed", "per_unit", "complex"] = "fixed"
    is_active: bool = True
    sort_order: int = 0


class ExtraOut(ExtraCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


class ExtraPriceCreate(BaseModel):
    extra_id: int
    price_set_id: int
    base_price: float | None = Field(default=None, ge=0)
    additional_unit_price: float | None = Field(default=None, ge=0)
    unit_description: str | None = None

    @model_validator(mode="after")
    def check_some_price(self):
        if self.base_price is None and self.additional_unit_price is None:
            raise ValueError("base_price or additional_unit_price is required")
        return self


class ExtraPriceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    extra_id: int
    price_set_id: int
    base_price: float | None = None
    additional_unit_price: float | None = None
    unit_description: str | None = None
    extra_code: str | None = None
    price_set_code: str | None = None
