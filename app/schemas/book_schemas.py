from pydantic import BaseModel, Field
from datetime import date
from decimal import Decimal
from typing import Optional


class BookAddDto(BaseModel):
    category_id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=150)
    author: str = Field(..., min_length=1, max_length=150)
    description: str = Field(..., max_length=150)
    value: Decimal = Field(default=Decimal("0"), ge=0)
    publish_date: date


class BookEditDto(BaseModel):
    id: int
    category_id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=150)
    author: str = Field(..., min_length=1, max_length=150)
    description: str = Field(..., max_length=150)
    value: Decimal = Field(default=Decimal("0"), ge=0)
    publish_date: date


class BookResultDto(BaseModel):
    # unset only on the payload of a rejected add
    id: Optional[int] = None
    category_id: int
    name: str
    author: str
    description: str
    value: Decimal
    publish_date: date

    class Config:
        from_attributes = True
