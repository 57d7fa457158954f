from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from venue_booking.pricing.types import SeasonRule


class SeasonRuleCreate(BaseModel):
    price_set_id: int
    start_date: date
    end_date: date
    days_of_week_mask: str = Field(description="Comma separated days, 0 = Sunday")
    priority: int = 1
    description: str | None = None

    @field_validator("days_of_week_mask")
    @classmethod
    def check_mask(cls, value: str) -> str:
        parts = [p.strip() for p in value.split(",") if p.strip()]
        if not parts:
            raise ValueError("days_of_week_mask must not be empty")
        if any(not p.isdigit() or int(p) > 6 for p in parts):
            raise ValueError("days_of_week_mask must contain days 0..6")
        return ",".join(str(d) for d in sorted(SeasonRule.parse_mask(value)))

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_date > self.end_date:
            raise ValueError("Start date must be before or equal to end date")
        return self


class SeasonRuleOut(SeasonRuleCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    price_set_code: str | None = None
