from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import selectinload
from sqlmodel import select

from app.models.book import Book
from app.models.category import Category
from app.models.paged_response import PagedResponse
from app.repositories.base import Repository
from app.utils.pagination import paginate


class BookRepository(Repository[Book]):
    """Books are always read together with their category."""

    model = Book

    def default_order(self):
        return (Book.name, Book.id)

    def _with_category(self):
        return select(Book).options(selectinload(Book.category))

    def get_all(self) -> List[Book]:
        query = self._with_category().order_by(*self.default_order())
        return list(self.session.exec(query).all())

    def get_all_with_pagination(self, page_number: int, page_size: int) -> PagedResponse:
        return paginate(
            session=self.session,
            query=select(Book).order_by(*self.default_order()),
            page_number=page_number,
            page_size=page_size,
            options=(selectinload(Book.category),),
        )

    def get_by_id(self, id: int) -> Optional[Book]:
        query = self._with_category().where(Book.id == id)
        return self.session.exec(query).first()

    def category_exists(self, category_id: int) -> bool:
        return self.session.get(Category, category_id) is not None

    def get_books_by_category(self, category_id: int) -> List[Book]:
        return self.search(Book.category_id == category_id)

    def search_book_with_category(self, searched_value: str) -> List[Book]:
        query = (
            self._with_category()
            .join(Category, Book.category_id == Category.id)
            .where(
                or_(
                    Book.name.contains(searched_value, autoescape=True),
                    Book.author.contains(searched_value, autoescape=True),
                    Book.description.contains(searched_value, autoescape=True),
                    Category.name.contains(searched_value, autoescape=True),
                )
            )
            .order_by(*self.default_order())
        )
        return list(self.session.exec(query).all())
