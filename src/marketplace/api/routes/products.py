from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from marketplace.api.dependencies import get_catalog_service
from marketplace.domain.models import Product, ProductCreate, ProductResponse
from marketplace.services.catalog_service import CatalogService

router = APIRouter(prefix="/products", tags=["Products"])

ServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
UserIdQuery = Annotated[int | None, Query(alias="userId")]


@router.get("", response_model=list[ProductResponse])
async def list_products(
    service: ServiceDep,
    q: str | None = None,
    user_id: UserIdQuery = None,
) -> list[ProductResponse]:
    """
    Listet alle Produkte, optional gefiltert über einen Suchbegriff.
    Mit userId wird der Favoriten-Status des Users aufgelöst.
    """
    return await service.get_products_with_favorite_status(user_id=user_id, search_query=q)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    service: ServiceDep,
    user_id: UserIdQuery = None,
) -> ProductResponse:
    product = await service.get_product_with_favorite_status(product_id, user_id=user_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found.")
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductCreate, service: ServiceDep) -> Product:
    return await service.create_product(payload)
