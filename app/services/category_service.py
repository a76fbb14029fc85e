# app/services/category_service.py
from typing import List, Optional
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.models.category import Category
from app.models.operation_result import OperationResult
from app.models.paged_response import PagedResponse
from app.repositories.category_repository import CategoryRepository
from app.services.book_service import BookService

logger = logging.getLogger(__name__)

DUPLICATE_CATEGORY_MESSAGE = "This category name is already being used"


class CategoryService:
    """Category reads plus the two write rules.

    A name may only be used by one category, and a category that still
    owns books cannot be removed.
    """

    def __init__(self, category_repository: CategoryRepository, book_service: BookService):
        self.category_repository = category_repository
        self.book_service = book_service

    def get_all(self) -> List[Category]:
        return self.category_repository.get_all()

    def get_all_with_pagination(self, page_number: int, page_size: int) -> PagedResponse:
        return self.category_repository.get_all_with_pagination(page_number, page_size)

    def get_by_id(self, id: int) -> Optional[Category]:
        return self.category_repository.get_by_id(id)

    def add(self, category: Category) -> OperationResult[Category]:
        try:
            if self.category_repository.search(Category.name == category.name):
                logger.warning(f"Rejected category add, name already used: {category.name}")
                return OperationResult.fail(DUPLICATE_CATEGORY_MESSAGE, payload=category)

            added = self.category_repository.add(category)
            logger.info(f"Category {added.id} added: {added.name}")
            return OperationResult.ok(added)

        except IntegrityError as e:
            self.category_repository.rollback()
            logger.warning(f"Category add hit a storage constraint: {e.orig}")
            return OperationResult.fail(DUPLICATE_CATEGORY_MESSAGE, payload=category, exception=e)

        except SQLAlchemyError as e:
            self.category_repository.rollback()
            logger.exception("Category add failed")
            return OperationResult.fail(str(e), payload=category, exception=e)

    def update(self, category: Category) -> OperationResult[Category]:
        try:
            duplicates = self.category_repository.search(
                Category.name == category.name,
                Category.id != category.id,
            )
            if duplicates:
                logger.warning(f"Rejected category {category.id} update, name already used: {category.name}")
                return OperationResult.fail(DUPLICATE_CATEGORY_MESSAGE, payload=category)

            updated = self.category_repository.update(category)
            logger.info(f"Category {updated.id} updated")
            return OperationResult.ok(updated)

        except IntegrityError as e:
            self.category_repository.rollback()
            logger.warning(f"Category update hit a storage constraint: {e.orig}")
            return OperationResult.fail(DUPLICATE_CATEGORY_MESSAGE, payload=category, exception=e)

        except SQLAlchemyError as e:
            self.category_repository.rollback()
            logger.exception(f"Category {category.id} update failed")
            return OperationResult.fail(str(e), payload=category, exception=e)

    def remove(self, category: Category) -> bool:
        books = self.book_service.get_books_by_category(category.id)
        if books:
            logger.warning(f"Category {category.id} still has {len(books)} books, not removed")
            return False

        category_id = category.id
        self.category_repository.remove(category)
        logger.info(f"Category {category_id} removed")
        return True

    def search(self, category_name: str) -> List[Category]:
        return self.category_repository.search(Category.name.contains(category_name, autoescape=True))
