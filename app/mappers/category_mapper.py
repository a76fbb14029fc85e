from app.models.category import Category
from app.schemas.category_schemas import CategoryAddDto, CategoryEditDto, CategoryResultDto


def category_from_add_dto(dto: CategoryAddDto) -> Category:
    return Category(name=dto.name)


def category_from_edit_dto(dto: CategoryEditDto) -> Category:
    return Category(id=dto.id, name=dto.name)


def category_to_result_dto(category: Category) -> CategoryResultDto:
    return CategoryResultDto(id=category.id, name=category.name)


def category_from_result_dto(dto: CategoryResultDto) -> Category:
    return Category(id=dto.id, name=dto.name)
