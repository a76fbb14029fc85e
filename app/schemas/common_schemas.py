from pydantic import BaseModel
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class PagedResponseDto(BaseModel, Generic[T]):
    page_number: int
    page_size: int
    total_pages: int
    total_records: int
    data: List[T]


class OperationResultDto(BaseModel, Generic[T]):
    payload: Optional[T] = None
    success: bool
    message: Optional[str] = None
