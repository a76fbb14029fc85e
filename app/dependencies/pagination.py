from fastapi import HTTPException, Query, status

from app.utils.pagination import InvalidPaginationError, validate_page_params


def page_params(
    page_number: int = Query(1, alias="pageNumber"),
    page_size: int = Query(10, alias="pageSize"),
):
    try:
        validate_page_params(page_number, page_size)
    except InvalidPaginationError as e:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, str(e))
    return page_number, page_size
