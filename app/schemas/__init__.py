from app.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from app.schemas.product import CategoryDetail, ProductCreate, ProductRead, ProductUpdate
from app.schemas.upload import FileUploadResponse
from app.schemas.user import UserCreate, UserRead, UserUpdate

__all__ = [
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "CategoryDetail",
    "ProductCreate",
    "ProductRead",
    "ProductUpdate",
    "UserCreate",
    "UserRead",
    "UserUpdate",
    "FileUploadResponse",
]
