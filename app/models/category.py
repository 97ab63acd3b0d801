from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.common import IntegerPrimaryKeyMixin, TimestampMixin


class Category(IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "categories"

    title: Mapped[str] = mapped_column(String(100), nullable=False)

    products = relationship(
        "Product",
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="Product.id",
    )
