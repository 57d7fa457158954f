from pydantic import BaseModel, ConfigDict, Field


class HallCreate(BaseModel):
    code: str = Field(min_length=1)
    name: str = Field(min_length=1)
    capacity: int = Field(gt=0)
    is_active: bool = True
    sort_order: int = 0


class HallOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str
    name: str
    capacity: int
    is_active: bool
    sort_order: int
