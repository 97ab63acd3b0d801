from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, StorageError
from app.db.base import Base
from app.models.common import utcnow

ModelT = TypeVar("ModelT", bound=Base)


class SqlRepository(Generic[ModelT]):
    """CRUD over one mapped model.

    ``update`` treats ``None`` as "leave unchanged" and always refreshes
    ``updated_at``, even when nothing else changed.
    """

    model: type[ModelT]
    resource: str

    def __init__(self, db: Session) -> None:
        self.db = db

    def _select(self):
        return select(self.model).order_by(self.model.id)

    def list(self) -> list[ModelT]:
        return list(self.db.scalars(self._select()).all())

    def get(self, entity_id: int) -> ModelT | None:
        return self.db.scalar(self._select().where(self.model.id == entity_id))

    def require(self, entity_id: int) -> ModelT:
        entity = self.get(entity_id)
        if entity is None:
            raise NotFoundError(self.resource, entity_id)
        return entity

    def create(self, **fields: Any) -> ModelT:
        entity = self.model(**fields)
        self.db.add(entity)
        self._commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity_id: int, changes: Mapping[str, Any]) -> ModelT:
        entity = self.require(entity_id)
        for key, value in changes.items():
            if value is not None:
                setattr(entity, key, value)
        entity.updated_at = utcnow()
        self._commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: int) -> None:
        entity = self.require(entity_id)
        self.db.delete(entity)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise StorageError(f"{self.resource} violates a storage constraint", detail=str(exc.orig)) from exc
