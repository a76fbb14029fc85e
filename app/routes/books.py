from typing import List, Tuple

from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies.pagination import page_params
from app.dependencies.services import get_book_service
from app.mappers.book_mapper import book_from_add_dto, book_from_edit_dto, book_to_result_dto
from app.mappers.common_mapper import operation_result_to_dto, paged_response_to_dto
from app.schemas.book_schemas import BookAddDto, BookEditDto, BookResultDto
from app.schemas.common_schemas import OperationResultDto, PagedResponseDto
from app.services.book_service import BookService

router = APIRouter()


@router.get("/", response_model=List[BookResultDto])
def get_all(service: BookService = Depends(get_book_service)):
    return [book_to_result_dto(b) for b in service.get_all()]


@router.get("/GetAllWithPagination", response_model=PagedResponseDto[BookResultDto])
def get_all_with_pagination(
    page: Tuple[int, int] = Depends(page_params),
    service: BookService = Depends(get_book_service),
):
    page_number, page_size = page
    paged = service.get_all_with_pagination(page_number, page_size)
    return paged_response_to_dto(paged, book_to_result_dto)


@router.get("/GetBooksByCategory/{category_id}", response_model=List[BookResultDto])
def get_books_by_category(category_id: int, service: BookService = Depends(get_book_service)):
    books = service.get_books_by_category(category_id)
    if not books:
        raise HTTPException(404, "No book was found for this category")
    return [book_to_result_dto(b) for b in books]


@router.get("/search/{book_name}", response_model=List[BookResultDto])
def search(book_name: str, service: BookService = Depends(get_book_service)):
    books = service.search(book_name)
    if not books:
        raise HTTPException(404, "None book was found")
    return [book_to_result_dto(b) for b in books]


@router.get("/SearchBookWithCategory/{value}", response_model=List[BookResultDto])
def search_book_with_category(value: str, service: BookService = Depends(get_book_service)):
    books = service.search_book_with_category(value)
    if not books:
        raise HTTPException(404, "None book was found")
    return [book_to_result_dto(b) for b in books]


@router.get("/{id}", response_model=BookResultDto)
def get_by_id(id: int, service: BookService = Depends(get_book_service)):
    book = service.get_by_id(id)
    if not book:
        raise HTTPException(404, "Book not found")
    return book_to_result_dto(book)


@router.post("/", response_model=OperationResultDto[BookResultDto])
def add(dto: BookAddDto, service: BookService = Depends(get_book_service)):
    result = service.add(book_from_add_dto(dto))
    result_dto = operation_result_to_dto(result, book_to_result_dto)

    if not result.success:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, result_dto.model_dump(mode="json"))

    return result_dto


@router.put("/{id}", response_model=OperationResultDto[BookResultDto])
def update(id: int, dto: BookEditDto, service: BookService = Depends(get_book_service)):
    if id != dto.id:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Route id and body id do not match")

    result = service.update(book_from_edit_dto(dto))
    result_dto = operation_result_to_dto(result, book_to_result_dto)

    if not result.success:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, result_dto.model_dump(mode="json"))

    return result_dto


@router.delete("/{id}")
def remove(id: int, service: BookService = Depends(get_book_service)):
    book = service.get_by_id(id)
    if not book:
        raise HTTPException(404, "Book not found")

    service.remove(book)
    return {"message": "Book deleted"}
