from fastapi import APIRouter, Depends, Response, status

from app.core.errors import NotFoundError
from app.models.category import Category
from app.repositories import CategoryRepository
from app.routers.deps import get_category_repository
from app.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from app.schemas.product import CategoryDetail

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryRead])
def list_categories(categories: CategoryRepository = Depends(get_category_repository)) -> list[Category]:
    return categories.list()


@router.get("/{category_id}", response_model=CategoryDetail)
def get_category(category_id: int, categories: CategoryRepository = Depends(get_category_repository)) -> Category:
    category = categories.get_with_products(category_id)
    if not category:
        raise NotFoundError("Category", category_id)
    return category


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: CategoryCreate,
    response: Response,
    categories: CategoryRepository = Depends(get_category_repository),
) -> Category:
    category = categories.create(title=payload.title)
    response.headers["Location"] = f"/categories/{category.id}"
    return category


@router.put("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    categories: CategoryRepository = Depends(get_category_repository),
) -> None:
    categories.update(category_id, payload.model_dump(exclude_unset=True))
    return None


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: int, categories: CategoryRepository = Depends(get_category_repository)) -> None:
    categories.delete(category_id)
    return None
