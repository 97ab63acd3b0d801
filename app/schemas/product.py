from datetime import datetime
from decimal import Decimal

from pydantic import Field

from app.schemas.category import CategoryRead
from app.schemas.common import CamelModel


class ProductCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    image_url: str = Field(min_length=1, max_length=500)
    category_id: int


class ProductUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1)
    price: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    image_url: str | None = Field(default=None, min_length=1, max_length=500)
    category_id: int | None = None


class ProductRead(CamelModel):
    id: int
    title: str
    description: str
    price: Decimal
    image_url: str
    category_id: int
    created_at: datetime
    updated_at: datetime
    category: CategoryRead | None = None


class CategoryDetail(CategoryRead):
    products: list[ProductRead] = Field(default_factory=list)
