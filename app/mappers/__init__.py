from app.mappers.book_mapper import (
    book_from_add_dto,
    book_from_edit_dto,
    book_from_result_dto,
    book_to_result_dto,
)
from app.mappers.category_mapper import (
    category_from_add_dto,
    category_from_edit_dto,
    category_from_result_dto,
    category_to_result_dto,
)
from app.mappers.common_mapper import operation_result_to_dto, paged_response_to_dto
