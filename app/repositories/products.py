from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session, selectinload

from app.core.errors import InvalidReferenceError
from app.models.product import Product
from app.repositories.base import SqlRepository
from app.repositories.categories import CategoryRepository


class ProductRepository(SqlRepository[Product]):
    model = Product
    resource = "Product"

    def __init__(self, db: Session) -> None:
        super().__init__(db)
        self.categories = CategoryRepository(db)

    def _select(self):
        return super()._select().options(selectinload(Product.category))

    def list_by_category(self, category_id: int) -> list[Product]:
        return list(self.db.scalars(self._select().where(Product.category_id == category_id)).all())

    def create(self, **fields: Any) -> Product:
        self._ensure_category(fields.get("category_id"))
        return super().create(**fields)

    def update(self, entity_id: int, changes: Mapping[str, Any]) -> Product:
        self.require(entity_id)
        if changes.get("category_id") is not None:
            self._ensure_category(changes["category_id"])
        return super().update(entity_id, changes)

    def _ensure_category(self, category_id: int | None) -> None:
        if category_id is None or not self.categories.exists(category_id):
            raise InvalidReferenceError("Category not found", detail=f"No category with id {category_id}")
