from unittest.mock import AsyncMock

import pytest
from prometheus_client import REGISTRY

from marketplace.domain.models import ProductCreate
from marketplace.repositories.favorite_repository import InMemoryFavoriteRepository
from marketplace.repositories.product_repository import InMemoryProductRepository
from marketplace.services.favorite_service import FavoriteService


@pytest.fixture  # type: ignore[misc]
def favorite_service(
    product_repo: InMemoryProductRepository, favorite_repo: InMemoryFavoriteRepository
) -> FavoriteService:
    return FavoriteService(favorite_repository=favorite_repo, product_repository=product_repo)


def _ops(action: str, result: str) -> float:
    return (
        REGISTRY.get_sample_value(
            "favorite_operations_total", {"action": action, "result": result}
        )
        or 0.0
    )


@pytest.mark.asyncio  # type: ignore[misc]
async def test_add_favorite_twice_yields_one_relation(
    favorite_service: FavoriteService, product_repo: InMemoryProductRepository
) -> None:
    await product_repo.create(ProductCreate(name="X", price=1000, image_url="u"))

    created_before = _ops("add", "created")
    existing_before = _ops("add", "existing")

    first = await favorite_service.add_favorite(1, 1)
    second = await favorite_service.add_favorite(1, 1)

    assert first is not None
    assert second == first
    assert len(await favorite_service.get_favorites(1)) == 1
    assert _ops("add", "created") == created_before + 1
    assert _ops("add", "existing") == existing_before + 1


@pytest.mark.asyncio  # type: ignore[misc]
async def test_add_favorite_unknown_product_is_rejected(
    product_repo: InMemoryProductRepository,
) -> None:
    favorite_repo = AsyncMock()
    service = FavoriteService(favorite_repository=favorite_repo, product_repository=product_repo)

    assert await service.add_favorite(1, 99) is None
    favorite_repo.add.assert_not_called()


@pytest.mark.asyncio  # type: ignore[misc]
async def test_remove_favorite(
    favorite_service: FavoriteService, product_repo: InMemoryProductRepository
) -> None:
    await product_repo.create(ProductCreate(name="X", price=1000, image_url="u"))

    assert await favorite_service.remove_favorite(1, 1) is False
    assert await favorite_service.get_favorites(1) == []

    await favorite_service.add_favorite(1, 1)
    assert await favorite_service.is_favorited(1, 1) is True

    assert await favorite_service.remove_favorite(1, 1) is True
    assert await favorite_service.is_favorited(1, 1) is False
