# src/marketplace/services/favorite_service.py
from __future__ import annotations

import logging

from marketplace.core.metrics import FAVORITE_OPERATIONS
from marketplace.domain.models import Favorite
from marketplace.repositories.base import AbstractFavoriteRepository, AbstractProductRepository

logger = logging.getLogger(__name__)


class FavoriteService:
    """
    Verwaltet die Favoriten-Relation.
    Produkt-Existenz wird geprüft, bevor die Relation verändert wird.
    """

    def __init__(
        self,
        favorite_repository: AbstractFavoriteRepository,
        product_repository: AbstractProductRepository,
    ) -> None:
        self._favorites = favorite_repository
        self._products = product_repository

    async def add_favorite(self, user_id: int, product_id: int) -> Favorite | None:
        """
        Favorisiert ein Produkt (idempotent).
        Gibt None zurück, wenn das Produkt nicht existiert.
        """
        if await self._products.find_by_id(product_id) is None:
            FAVORITE_OPERATIONS.labels(action="add", result="product_not_found").inc()
            logger.info("Rejected favorite for unknown product %s (user %s)", product_id, user_id)
            return None

        already = await self._favorites.exists(user_id, product_id)
        favorite = await self._favorites.add(user_id, product_id)
        FAVORITE_OPERATIONS.labels(action="add", result="existing" if already else "created").inc()
        logger.debug("User %s favorited product %s (favorite %s)", user_id, product_id, favorite.id)
        return favorite

    async def remove_favorite(self, user_id: int, product_id: int) -> bool:
        removed = await self._favorites.remove(user_id, product_id)
        result = "removed" if removed else "not_found"
        FAVORITE_OPERATIONS.labels(action="remove", result=result).inc()
        return removed

    async def is_favorited(self, user_id: int, product_id: int) -> bool:
        return await self._favorites.exists(user_id, product_id)

    async def get_favorites(self, user_id: int) -> list[Favorite]:
        return await self._favorites.find_by_user(user_id)
