"""Helpers for building rows directly in a test session."""

from datetime import date
from decimal import Decimal

from sqlmodel import Session

from app.models.book import Book
from app.models.category import Category


def make_categories(session: Session, count: int, prefix: str = "Category") -> list[Category]:
    categories = [Category(name=f"{prefix} {i}") for i in range(1, count + 1)]
    session.add_all(categories)
    session.commit()
    for category in categories:
        session.refresh(category)
    return categories


def make_book(session: Session, category: Category, name: str, **fields) -> Book:
    book = Book(
        name=name,
        author=fields.pop("author", f"Author of {name}"),
        description=fields.pop("description", f"About {name}"),
        value=fields.pop("value", Decimal("10.00")),
        publish_date=fields.pop("publish_date", date(2020, 1, 1)),
        category_id=category.id,
        **fields,
    )
    session.add(book)
    session.commit()
    session.refresh(book)
    return book
