from pydantic import BaseModel, Field, computed_field
from typing import Generic, List, TypeVar

T = TypeVar("T")


def calculate_total_pages(total_records: int, page_size: int) -> int:
    """Ceiling of ``total_records / page_size`` without going through floats."""
    if total_records <= 0:
        return 0
    return (total_records + page_size - 1) // page_size


class PagedResponse(BaseModel, Generic[T]):
    """One page of records plus the metadata needed to navigate the rest.

    ``total_pages`` is always derived from ``total_records`` and ``page_size``.
    """

    data: List[T] = Field(default_factory=list)
    page_number: int = Field(ge=1)
    page_size: int = Field(ge=1)
    total_records: int = Field(ge=0)

    @computed_field
    @property
    def total_pages(self) -> int:
        return calculate_total_pages(self.total_records, self.page_size)

    class Config:
        arbitrary_types_allowed = True
