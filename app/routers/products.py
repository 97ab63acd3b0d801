from fastapi import APIRouter, Depends, Response, status

from app.models.product import Product
from app.repositories import ProductRepository
from app.routers.deps import get_product_repository
from app.schemas.product import ProductCreate, ProductRead, ProductUpdate

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[ProductRead])
def list_products(products: ProductRepository = Depends(get_product_repository)) -> list[Product]:
    return products.list()


@router.get("/category/{category_id}", response_model=list[ProductRead])
def list_products_by_category(
    category_id: int,
    products: ProductRepository = Depends(get_product_repository),
) -> list[Product]:
    return products.list_by_category(category_id)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: int, products: ProductRepository = Depends(get_product_repository)) -> Product:
    return products.require(product_id)


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    response: Response,
    products: ProductRepository = Depends(get_product_repository),
) -> Product:
    product = products.create(**payload.model_dump())
    response.headers["Location"] = f"/products/{product.id}"
    return product


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    products: ProductRepository = Depends(get_product_repository),
) -> None:
    products.update(product_id, payload.model_dump(exclude_unset=True))
    return None


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, products: ProductRepository = Depends(get_product_repository)) -> None:
    products.delete(product_id)
    return None
