# app/services/book_service.py
from typing import List, Optional
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.models.book import Book
from app.models.operation_result import OperationResult
from app.models.paged_response import PagedResponse
from app.repositories.book_repository import BookRepository

logger = logging.getLogger(__name__)

DUPLICATE_BOOK_MESSAGE = "This book name is already being used"
CATEGORY_NOT_FOUND_MESSAGE = "Category not found"


class BookService:
    def __init__(self, book_repository: BookRepository):
        self.book_repository = book_repository

    def get_all(self) -> List[Book]:
        return self.book_repository.get_all()

    def get_all_with_pagination(self, page_number: int, page_size: int) -> PagedResponse:
        return self.book_repository.get_all_with_pagination(page_number, page_size)

    def get_by_id(self, id: int) -> Optional[Book]:
        return self.book_repository.get_by_id(id)

    def get_books_by_category(self, category_id: int) -> List[Book]:
        return self.book_repository.get_books_by_category(category_id)

    def search(self, book_name: str) -> List[Book]:
        return self.book_repository.search(Book.name.contains(book_name, autoescape=True))

    def search_book_with_category(self, searched_value: str) -> List[Book]:
        return self.book_repository.search_book_with_category(searched_value)

    def add(self, book: Book) -> OperationResult[Book]:
        try:
            if self.book_repository.search(Book.name == book.name):
                logger.warning(f"Rejected book add, name already used: {book.name}")
                return OperationResult.fail(DUPLICATE_BOOK_MESSAGE, payload=book)

            if not self.book_repository.category_exists(book.category_id):
                logger.warning(f"Rejected book add, unknown category {book.category_id}")
                return OperationResult.fail(CATEGORY_NOT_FOUND_MESSAGE, payload=book)

            added = self.book_repository.add(book)
            logger.info(f"Book {added.id} added: {added.name}")
            return OperationResult.ok(added)

        except IntegrityError as e:
            self.book_repository.rollback()
            logger.warning(f"Book add hit a storage constraint: {e.orig}")
            return OperationResult.fail(DUPLICATE_BOOK_MESSAGE, payload=book, exception=e)

        except SQLAlchemyError as e:
            self.book_repository.rollback()
            logger.exception("Book add failed")
            return OperationResult.fail(str(e), payload=book, exception=e)

    def update(self, book: Book) -> OperationResult[Book]:
        try:
            if self.book_repository.search(Book.name == book.name, Book.id != book.id):
                logger.warning(f"Rejected book {book.id} update, name already used: {book.name}")
                return OperationResult.fail(DUPLICATE_BOOK_MESSAGE, payload=book)

            if not self.book_repository.category_exists(book.category_id):
                logger.warning(f"Rejected book {book.id} update, unknown category {book.category_id}")
                return OperationResult.fail(CATEGORY_NOT_FOUND_MESSAGE, payload=book)

            updated = self.book_repository.update(book)
            logger.info(f"Book {updated.id} updated")
            return OperationResult.ok(updated)

        except IntegrityError as e:
            self.book_repository.rollback()
            logger.warning(f"Book update hit a storage constraint: {e.orig}")
            return OperationResult.fail(DUPLICATE_BOOK_MESSAGE, payload=book, exception=e)

        except SQLAlchemyError as e:
            self.book_repository.rollback()
            logger.exception(f"Book {book.id} update failed")
            return OperationResult.fail(str(e), payload=book, exception=e)

    def remove(self, book: Book) -> bool:
        book_id = book.id
        self.book_repository.remove(book)
        logger.info(f"Book {book_id} removed")
        return True
