from pydantic import BaseModel, Field
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class OperationResult(BaseModel, Generic[T]):
    """Outcome of a service mutation.

    Expected business failures (duplicate names, bad references) come back as
    ``success=False`` with a readable message instead of raising.
    """

    payload: Optional[T] = None
    success: bool = True
    message: Optional[str] = None
    exception: Optional[Exception] = Field(default=None, exclude=True)

    class Config:
        arbitrary_types_allowed = True

    @classmethod
    def ok(cls, payload: T) -> "OperationResult[T]":
        return cls(payload=payload, success=True)

    @classmethod
    def fail(
        cls,
        message: str,
        payload: Optional[T] = None,
        exception: Optional[Exception] = None,
    ) -> "OperationResult[T]":
        return cls(payload=payload, success=False, message=message, exception=exception)
