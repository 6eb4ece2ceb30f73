from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from marketplace.domain.models import Favorite, Product, ProductCreate, User, UserCreate


class AbstractUserRepository(ABC):
    @abstractmethod
    async def create(self, payload: UserCreate) -> User:
        """Creates a user with the next free ID. Raises UsernameTakenError on duplicates."""
        ...

    @abstractmethod
    async def find_by_id(self, user_id: int) -> User | None:
        """Finds a user by ID."""
        ...

    @abstractmethod
    async def find_by_username(self, username: str) -> User | None:
        """Finds a user by exact username."""
        ...


class AbstractProductRepository(ABC):
    @abstractmethod
    async def create(self, payload: ProductCreate) -> Product:
        """Creates a product with the next free ID."""
        ...

    @abstractmethod
    async def find_by_id(self, product_id: int) -> Product | None:
        """Finds a product by ID."""
        ...

    @abstractmethod
    async def find_all(self) -> list[Product]:
        """Returns all products in creation order."""
        ...

    @abstractmethod
    async def search(self, query: str | None) -> list[Product]:
        """Case-insensitive substring match over name and description."""
        ...


class AbstractFavoriteRepository(ABC):
    @abstractmethod
    async def add(self, user_id: int, product_id: int) -> Favorite:
        """Adds a favorite. Returns the existing one if the pair is already stored."""
        ...

    @abstractmethod
    async def remove(self, user_id: int, product_id: int) -> bool:
        """Removes the favorite for the pair. Returns True if deleted."""
        ...

    @abstractmethod
    async def exists(self, user_id: int, product_id: int) -> bool:
        """Checks whether the user has favorited the product."""
        ...

    @abstractmethod
    async def find_by_user(self, user_id: int) -> list[Favorite]:
        """Returns all favorites of a user in insertion order."""
        ...

    @abstractmethod
    async def count_by_products(self, product_ids: list[int]) -> dict[int, int]:
        """Counts favorites per product ID. Every requested ID is present in the result."""
        ...
