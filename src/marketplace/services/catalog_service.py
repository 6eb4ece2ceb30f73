# src/marketplace/services/catalog_service.py
from __future__ import annotations

from marketplace.core.metrics import PRODUCT_SEARCHES
from marketplace.domain.models import Product, ProductCreate, ProductResponse, format_price
from marketplace.domain.ports import LikesCountPort
from marketplace.repositories.base import AbstractFavoriteRepository, AbstractProductRepository


class CatalogService:
    """
    Read-Model Projector: kombiniert Katalog, Suche und Favoriten
    zu ProductResponse-Objekten für die API.
    """

    def __init__(
        self,
        product_repository: AbstractProductRepository,
        favorite_repository: AbstractFavoriteRepository,
        likes_counter: LikesCountPort,
        currency_symbol: str = "€",
    ) -> None:
        self._products = product_repository
        self._favorites = favorite_repository
        self._likes = likes_counter
        self._currency_symbol = currency_symbol

    async def create_product(self, payload: ProductCreate) -> Product:
        return await self._products.create(payload)

    async def search_products(self, query: str | None) -> list[Product]:
        if query:
            PRODUCT_SEARCHES.inc()
        return await self._products.search(query)

    async def get_products_with_favorite_status(
        self, user_id: int | None, search_query: str | None = None
    ) -> list[ProductResponse]:
        # 1. Basisliste: Suche oder kompletter Katalog
        products = await self.search_products(search_query)

        # 2. Favoriten des Users einmalig auflösen, nicht pro Produkt
        favorited_ids = await self._favorited_product_ids(user_id)

        # 3. Projektion in Reihenfolge der Basisliste
        likes = await self._likes.count([p.id for p in products])
        return [
            self._to_response(p, is_favorited=p.id in favorited_ids, likes_count=likes[p.id])
            for p in products
        ]

    async def get_product_with_favorite_status(
        self, product_id: int, user_id: int | None
    ) -> ProductResponse | None:
        product = await self._products.find_by_id(product_id)
        if product is None:
            return None

        is_favorited = (
            await self._favorites.exists(user_id, product_id) if user_id is not None else False
        )
        likes = await self._likes.count([product_id])
        return self._to_response(product, is_favorited=is_favorited, likes_count=likes[product_id])

    async def get_favorite_products(self, user_id: int) -> list[ProductResponse]:
        """Alle favorisierten Produkte eines Users, in Reihenfolge des Favorisierens."""
        favorites = await self._favorites.find_by_user(user_id)

        products: list[Product] = []
        for favorite in favorites:
            product = await self._products.find_by_id(favorite.product_id)
            if product is not None:
                products.append(product)

        likes = await self._likes.count([p.id for p in products])
        return [
            self._to_response(p, is_favorited=True, likes_count=likes[p.id]) for p in products
        ]

    async def _favorited_product_ids(self, user_id: int | None) -> set[int]:
        if user_id is None:
            return set()
        return {f.product_id for f in await self._favorites.find_by_user(user_id)}

    def _to_response(
        self, product: Product, is_favorited: bool, likes_count: int
    ) -> ProductResponse:
        return ProductResponse(
            **product.model_dump(),
            formatted_price=format_price(product.price, self._currency_symbol),
            is_favorited=is_favorited,
            likes_count=likes_count,
        )
