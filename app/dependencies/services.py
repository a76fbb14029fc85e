from fastapi import Depends
from sqlmodel import Session

from app.database import get_session
from app.repositories.book_repository import BookRepository
from app.repositories.category_repository import CategoryRepository
from app.services.book_service import BookService
from app.services.category_service import CategoryService


def get_book_repository(session: Session = Depends(get_session)) -> BookRepository:
    return BookRepository(session)


def get_category_repository(session: Session = Depends(get_session)) -> CategoryRepository:
    return CategoryRepository(session)


def get_book_service(
    book_repository: BookRepository = Depends(get_book_repository),
) -> BookService:
    return BookService(book_repository)


def get_category_service(
    category_repository: CategoryRepository = Depends(get_category_repository),
    book_service: BookService = Depends(get_book_service),
) -> CategoryService:
    return CategoryService(category_repository, book_service)
