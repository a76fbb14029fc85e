# app/repositories/base.py
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import NoResultFound
from sqlmodel import Session, select

from app.models.base import Entity
from app.models.paged_response import PagedResponse
from app.utils.pagination import paginate

ModelT = TypeVar("ModelT", bound=Entity)


class Repository(Generic[ModelT]):
    """CRUD, predicate search and pagination over one entity type.

    Subclasses set ``model`` and may override ``default_order`` or any query.
    All work goes through the injected session; ``save_changes`` commits it.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def default_order(self):
        return (self.model.id,)

    def add(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        self.save_changes()
        self.session.refresh(entity)
        return entity

    def get_all(self) -> List[ModelT]:
        query = select(self.model).order_by(*self.default_order())
        return list(self.session.exec(query).all())

    def get_all_with_pagination(self, page_number: int, page_size: int) -> PagedResponse:
        query = select(self.model).order_by(*self.default_order())
        return paginate(
            session=self.session,
            query=query,
            page_number=page_number,
            page_size=page_size,
        )

    def get_by_id(self, id: int) -> Optional[ModelT]:
        return self.session.get(self.model, id)

    def update(self, entity: ModelT) -> ModelT:
        # entity may be detached (built from an edit DTO); merge onto the stored row
        if entity.id is None or self.session.get(self.model, entity.id) is None:
            raise NoResultFound(f"{self.model.__name__} {entity.id} does not exist")

        merged = self.session.merge(entity)
        self.save_changes()
        self.session.refresh(merged)
        return merged

    def remove(self, entity: ModelT) -> None:
        self.session.delete(self.session.merge(entity))
        self.save_changes()

    def search(self, *criteria) -> List[ModelT]:
        query = select(self.model).where(*criteria).order_by(*self.default_order())
        return list(self.session.exec(query).all())

    def save_changes(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
