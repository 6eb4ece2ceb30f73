# src/marketplace/repositories/product_repository.py
from __future__ import annotations

from itertools import count

from marketplace.domain.models import Product, ProductCreate
from marketplace.repositories.base import AbstractProductRepository


class InMemoryProductRepository(AbstractProductRepository):
    """
    In-Memory Katalog. Die Einfügereihenfolge ist die einzige definierte Sortierung.
    Suche ist ein linearer Scan ohne vorberechneten Index.
    """

    def __init__(self) -> None:
        self._products: dict[int, Product] = {}
        self._ids = count(1)

    async def create(self, payload: ProductCreate) -> Product:
        product = Product(id=next(self._ids), **payload.model_dump())
        self._products[product.id] = product
        return product

    async def find_by_id(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    async def find_all(self) -> list[Product]:
        return list(self._products.values())

    async def search(self, query: str | None) -> list[Product]:
        if not query:
            return await self.find_all()

        query_lower = query.lower()
        return [
            p
            for p in self._products.values()
            if query_lower in p.name.lower()
            or (p.description and query_lower in p.description.lower())
        ]
