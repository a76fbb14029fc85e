from app.models.base import Entity
from app.models.book import Book
from app.models.category import Category
from app.models.operation_result import OperationResult
from app.models.paged_response import PagedResponse, calculate_total_pages

# add ALL table models here
