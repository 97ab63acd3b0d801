from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.db.session import get_db
from app.repositories import CategoryRepository, ProductRepository, UserRepository
from app.services.uploads import FtpConfig, ImageUploader


def get_uploader() -> ImageUploader:
    return ImageUploader(FtpConfig.from_settings(get_settings()))


def get_category_repository(db: Session = Depends(get_db)) -> CategoryRepository:
    return CategoryRepository(db)


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)
