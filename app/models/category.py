from sqlmodel import Field, Relationship
from typing import TYPE_CHECKING, List

from app.models.base import Entity

if TYPE_CHECKING:
    from .book import Book

class Category(Entity, table=True):
    __tablename__ = "categories"

    name: str = Field(max_length=150, index=True, unique=True)

    books: List["Book"] = Relationship(back_populates="category")
