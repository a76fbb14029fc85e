from sqlalchemy import func
from sqlmodel import select
from typing import Any, Sequence

from app.models.paged_response import PagedResponse

MAX_PAGE_SIZE = 1000


class InvalidPaginationError(ValueError):
    pass


def validate_page_params(page_number: int, page_size: int) -> None:
    if page_number < 1 or page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise InvalidPaginationError(
            f"pageNumber must be at least 1 and pageSize between 1 and {MAX_PAGE_SIZE} "
            f"(got pageNumber={page_number}, pageSize={page_size})"
        )


def paginate(
    *,
    session,
    query,
    page_number: int = 1,
    page_size: int = 10,
    options: Sequence[Any] = (),
) -> PagedResponse:
    """Return the requested 1-based page of ``query``.

    ``query`` must already carry a total ordering; the count ignores the
    page window. Loader ``options`` only apply to the page fetch.
    """
    validate_page_params(page_number, page_size)

    offset = (page_number - 1) * page_size

    total = session.exec(
        select(func.count()).select_from(query.subquery())
    ).one()

    # past the end: the offset may not even fit a database integer
    if offset >= total:
        results = []
    else:
        results = session.exec(
            query.options(*options).offset(offset).limit(page_size)
        ).all()

    return PagedResponse(
        data=list(results),
        page_number=page_number,
        page_size=page_size,
        total_records=total,
    )
