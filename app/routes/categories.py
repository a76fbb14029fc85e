from typing import List, Tuple

from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies.pagination import page_params
from app.dependencies.services import get_category_service
from app.mappers.category_mapper import (
    category_from_add_dto,
    category_from_edit_dto,
    category_to_result_dto,
)
from app.mappers.common_mapper import operation_result_to_dto, paged_response_to_dto
from app.schemas.category_schemas import CategoryAddDto, CategoryEditDto, CategoryResultDto
from app.schemas.common_schemas import OperationResultDto, PagedResponseDto
from app.services.category_service import CategoryService

router = APIRouter()


@router.get("/", response_model=List[CategoryResultDto])
def get_all(service: CategoryService = Depends(get_category_service)):
    return [category_to_result_dto(c) for c in service.get_all()]


@router.get("/GetAllWithPagination", response_model=PagedResponseDto[CategoryResultDto])
def get_all_with_pagination(
    page: Tuple[int, int] = Depends(page_params),
    service: CategoryService = Depends(get_category_service),
):
    page_number, page_size = page
    paged = service.get_all_with_pagination(page_number, page_size)
    return paged_response_to_dto(paged, category_to_result_dto)


@router.get("/search/{category}", response_model=List[CategoryResultDto])
def search(category: str, service: CategoryService = Depends(get_category_service)):
    categories = service.search(category)
    if not categories:
        raise HTTPException(404, "None category was found")
    return [category_to_result_dto(c) for c in categories]


@router.get("/{id}", response_model=CategoryResultDto)
def get_by_id(id: int, service: CategoryService = Depends(get_category_service)):
    category = service.get_by_id(id)
    if not category:
        raise HTTPException(404, "Category not found")
    return category_to_result_dto(category)


@router.post("/", response_model=OperationResultDto[CategoryResultDto])
def add(dto: CategoryAddDto, service: CategoryService = Depends(get_category_service)):
    result = service.add(category_from_add_dto(dto))
    result_dto = operation_result_to_dto(result, category_to_result_dto)

    if not result.success:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, result_dto.model_dump(mode="json"))

    return result_dto


@router.put("/{id}", response_model=OperationResultDto[CategoryResultDto])
def update(
    id: int,
    dto: CategoryEditDto,
    service: CategoryService = Depends(get_category_service),
):
    if id != dto.id:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Route id and body id do not match")

    result = service.update(category_from_edit_dto(dto))
    result_dto = operation_result_to_dto(result, category_to_result_dto)

    if not result.success:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, result_dto.model_dump(mode="json"))

    return result_dto


@router.delete("/{id}")
def remove(id: int, service: CategoryService = Depends(get_category_service)):
    category = service.get_by_id(id)
    if not category:
        raise HTTPException(404, "Category not found")

    if not service.remove(category):
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            "Category has related books and cannot be removed",
        )

    return {"message": "Category deleted"}
