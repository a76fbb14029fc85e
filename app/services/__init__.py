from app.services.book_service import BookService
from app.services.category_service import CategoryService
