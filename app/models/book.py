from sqlmodel import Field, Relationship
from typing import Optional, TYPE_CHECKING
from datetime import date
from decimal import Decimal

from app.models.base import Entity


if TYPE_CHECKING:
    from .category import Category

class Book(Entity, table=True):
    __tablename__ = "books"

    #main info
    name: str = Field(max_length=150, index=True, unique=True)
    author: str = Field(max_length=150)
    description: str = Field(max_length=150)

    #shop details
    value: Decimal = Field(default=Decimal("0"), max_digits=18, decimal_places=2)
    publish_date: date

    #category
    category_id: int = Field(foreign_key="categories.id", ondelete="RESTRICT")
    category: Optional["Category"] = Relationship(back_populates="books")
