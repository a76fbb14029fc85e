# app/models/base.py
from sqlmodel import SQLModel, Field
from typing import Optional

class Entity(SQLModel):
    """Base class for all persisted bookstore records.

    The identity is assigned by the database on insert and never changes.
    """

    id: Optional[int] = Field(default=None, primary_key=True)
