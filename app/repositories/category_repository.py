from app.models.category import Category
from app.repositories.base import Repository


class CategoryRepository(Repository[Category]):
    model = Category
