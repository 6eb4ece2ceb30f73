# src/marketplace/api/routes/favorites.py
from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from marketplace.api.dependencies import get_catalog_service, get_favorite_service
from marketplace.domain.models import (
    FavoriteAddedResponse,
    FavoriteRemovedResponse,
    FavoriteRequest,
    ProductResponse,
)
from marketplace.services.catalog_service import CatalogService
from marketplace.services.favorite_service import FavoriteService

router = APIRouter(prefix="/favorites", tags=["Favorites"])

ServiceDep = Annotated[FavoriteService, Depends(get_favorite_service)]
CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]

_MISSING_FIELDS = "userId and productId are required."


@router.post("", response_model=FavoriteAddedResponse, status_code=status.HTTP_201_CREATED)
async def add_favorite(
    service: ServiceDep,
    payload: Annotated[FavoriteRequest | None, Body()] = None,
) -> FavoriteAddedResponse:
    if payload is None or payload.user_id is None or payload.product_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_MISSING_FIELDS)

    favorite = await service.add_favorite(payload.user_id, payload.product_id)
    if favorite is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found.")
    return FavoriteAddedResponse(message="Product added to favorites", favorite=favorite)


@router.delete("", response_model=FavoriteRemovedResponse)
async def remove_favorite(
    service: ServiceDep,
    payload: Annotated[FavoriteRequest | None, Body()] = None,
    user_id: Annotated[int | None, Query(alias="userId")] = None,
    product_id: Annotated[int | None, Query(alias="productId")] = None,
) -> FavoriteRemovedResponse:
    """Entfernt einen Favoriten. userId/productId dürfen im Body oder als Query kommen."""
    if payload is not None:
        user_id = payload.user_id if payload.user_id is not None else user_id
        product_id = payload.product_id if payload.product_id is not None else product_id
    if user_id is None or product_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_MISSING_FIELDS)

    if not await service.remove_favorite(user_id, product_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Favorite not found.")
    return FavoriteRemovedResponse(message="Product removed from favorites")


@router.get("", response_model=list[ProductResponse])
async def list_favorites(
    catalog: CatalogServiceDep,
    user_id: Annotated[int | None, Query(alias="userId")] = None,
) -> list[ProductResponse]:
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="userId is required.")
    return await catalog.get_favorite_products(user_id)
