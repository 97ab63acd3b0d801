from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


class CategoryCreate(CamelModel):
    title: str = Field(min_length=1, max_length=100)


class CategoryUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=100)


class CategoryRead(CamelModel):
    id: int
    title: str
    created_at: datetime
    updated_at: datetime
