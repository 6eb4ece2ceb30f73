# src/marketplace/adapters/likes.py
from __future__ import annotations

import random

from marketplace.domain.ports import LikesCountPort
from marketplace.repositories.base import AbstractFavoriteRepository


class FavoritesLikesCounter(LikesCountPort):
    """Likes = Anzahl der User, die das Produkt favorisiert haben."""

    def __init__(self, repository: AbstractFavoriteRepository) -> None:
        self._repo = repository

    async def count(self, product_ids: list[int]) -> dict[int, int]:
        return await self._repo.count_by_products(product_ids)


class RandomLikesCounter(LikesCountPort):
    """
    Demo-Platzhalter: pro Request neu gewürfelte Zahl, nicht persistiert.
    """

    def __init__(self, upper_bound: int = 50, rng: random.Random | None = None) -> None:
        self._upper_bound = upper_bound
        self._rng = rng or random.Random()

    async def count(self, product_ids: list[int]) -> dict[int, int]:
        if self._upper_bound <= 0:
            return {pid: 0 for pid in product_ids}
        return {pid: self._rng.randrange(self._upper_bound) for pid in product_ids}
