from app.repositories.categories import CategoryRepository
from app.repositories.products import ProductRepository
from app.repositories.users import UserRepository

__all__ = ["CategoryRepository", "ProductRepository", "UserRepository"]
