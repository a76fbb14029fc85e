from pydantic import BaseModel, Field
from typing import Optional


class CategoryAddDto(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)


class CategoryEditDto(BaseModel):
    id: int
    name: str = Field(..., min_length=1, max_length=150)


class CategoryResultDto(BaseModel):
    # unset only on the payload of a rejected add
    id: Optional[int] = None
    name: str

    class Config:
        from_attributes = True
