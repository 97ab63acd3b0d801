from sqlalchemy.orm import selectinload

from app.models.category import Category
from app.repositories.base import SqlRepository


class CategoryRepository(SqlRepository[Category]):
    """Categories own their products: deleting one removes its products in the same commit."""

    model = Category
    resource = "Category"

    def get_with_products(self, category_id: int) -> Category | None:
        return self.db.scalar(
            self._select().options(selectinload(Category.products)).where(Category.id == category_id)
        )

    def exists(self, category_id: int) -> bool:
        return self.db.get(Category, category_id) is not None
