from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel


class UserCreate(CamelModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=1, max_length=256)
    password: str = Field(min_length=1)
    profile_image: str | None = Field(default=None, max_length=500)


class UserUpdate(CamelModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = Field(default=None, min_length=1, max_length=256)
    password: str | None = None
    profile_image: str | None = Field(default=None, max_length=500)


class UserRead(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    profile_image: str | None
    created_at: datetime
    updated_at: datetime
