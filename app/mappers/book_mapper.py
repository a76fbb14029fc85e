from app.models.book import Book
from app.schemas.book_schemas import BookAddDto, BookEditDto, BookResultDto


def book_from_add_dto(dto: BookAddDto) -> Book:
    return Book(
        category_id=dto.category_id,
        name=dto.name,
        author=dto.author,
        description=dto.description,
        value=dto.value,
        publish_date=dto.publish_date,
    )


def book_from_edit_dto(dto: BookEditDto) -> Book:
    return Book(
        id=dto.id,
        category_id=dto.category_id,
        name=dto.name,
        author=dto.author,
        description=dto.description,
        value=dto.value,
        publish_date=dto.publish_date,
    )


def book_to_result_dto(book: Book) -> BookResultDto:
    # flat projection, the category itself is not expanded
    return BookResultDto(
        id=book.id,
        category_id=book.category_id,
        name=book.name,
        author=book.author,
        description=book.description,
        value=book.value,
        publish_date=book.publish_date,
    )


def book_from_result_dto(dto: BookResultDto) -> Book:
    return Book(
        id=dto.id,
        category_id=dto.category_id,
        name=dto.name,
        author=dto.author,
        description=dto.description,
        value=dto.value,
        publish_date=dto.publish_date,
    )
