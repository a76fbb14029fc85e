from typing import Callable, TypeVar

from app.models.operation_result import OperationResult
from app.models.paged_response import PagedResponse
from app.schemas.common_schemas import OperationResultDto, PagedResponseDto

EntityT = TypeVar("EntityT")
DtoT = TypeVar("DtoT")


def paged_response_to_dto(
    paged: PagedResponse,
    item_mapper: Callable[[EntityT], DtoT],
) -> PagedResponseDto[DtoT]:
    """Copy the page metadata verbatim and map ``data`` element by element."""
    return PagedResponseDto(
        page_number=paged.page_number,
        page_size=paged.page_size,
        total_pages=paged.total_pages,
        total_records=paged.total_records,
        data=[item_mapper(item) for item in paged.data],
    )


def operation_result_to_dto(
    result: OperationResult,
    item_mapper: Callable[[EntityT], DtoT],
) -> OperationResultDto[DtoT]:
    payload = item_mapper(result.payload) if result.payload is not None else None
    return OperationResultDto(
        payload=payload,
        success=result.success,
        message=result.message,
    )
