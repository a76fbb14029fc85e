from app.repositories.base import Repository
from app.repositories.book_repository import BookRepository
from app.repositories.category_repository import CategoryRepository
