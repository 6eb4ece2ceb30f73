# src/marketplace/repositories/favorite_repository.py
from __future__ import annotations

from collections import Counter
from itertools import count

from marketplace.domain.models import Favorite
from marketplace.repositories.base import AbstractFavoriteRepository


class InMemoryFavoriteRepository(AbstractFavoriteRepository):
    """
    Many-to-many Relation zwischen Usern und Produkten.
    Pro (user_id, product_id) existiert höchstens ein Favorite.
    """

    def __init__(self) -> None:
        # Struktur: {favorite_id: Favorite} plus Index {(user_id, product_id): favorite_id}
        self._favorites: dict[int, Favorite] = {}
        self._by_pair: dict[tuple[int, int], int] = {}
        self._ids = count(1)

    async def add(self, user_id: int, product_id: int) -> Favorite:
        existing_id = self._by_pair.get((user_id, product_id))
        if existing_id is not None:
            return self._favorites[existing_id]

        favorite = Favorite(id=next(self._ids), user_id=user_id, product_id=product_id)
        self._favorites[favorite.id] = favorite
        self._by_pair[(user_id, product_id)] = favorite.id
        return favorite

    async def remove(self, user_id: int, product_id: int) -> bool:
        favorite_id = self._by_pair.pop((user_id, product_id), None)
        if favorite_id is None:
            return False
        del self._favorites[favorite_id]
        return True

    async def exists(self, user_id: int, product_id: int) -> bool:
        return (user_id, product_id) in self._by_pair

    async def find_by_user(self, user_id: int) -> list[Favorite]:
        return [f for f in self._favorites.values() if f.user_id == user_id]

    async def count_by_products(self, product_ids: list[int]) -> dict[int, int]:
        counts = Counter(f.product_id for f in self._favorites.values())
        return {pid: counts[pid] for pid in product_ids}
