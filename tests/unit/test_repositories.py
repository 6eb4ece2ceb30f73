# tests/unit/test_repositories.py
import pytest

from marketplace.domain.models import ProductCreate, UserCreate
from marketplace.domain.ports import UsernameTakenError
from marketplace.repositories.favorite_repository import InMemoryFavoriteRepository
from marketplace.repositories.product_repository import InMemoryProductRepository
from marketplace.repositories.store import SAMPLE_PRODUCTS, MarketplaceStore
from marketplace.repositories.user_repository import InMemoryUserRepository


def _payload(name: str, description: str | None = None, price: int = 1000) -> ProductCreate:
    return ProductCreate(name=name, price=price, description=description, image_url="u")


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


@pytest.mark.asyncio  # type: ignore[misc]
async def test_user_ids_start_at_one_and_increase() -> None:
    repo = InMemoryUserRepository()
    alice = await repo.create(UserCreate(username="alice", password="pw"))
    bob = await repo.create(UserCreate(username="bob", password="pw"))

    assert alice.id == 1
    assert bob.id == 2
    assert await repo.find_by_id(2) == bob
    assert await repo.find_by_username("alice") == alice


@pytest.mark.asyncio  # type: ignore[misc]
async def test_user_lookup_absent_returns_none() -> None:
    repo = InMemoryUserRepository()
    assert await repo.find_by_id(42) is None
    assert await repo.find_by_username("nobody") is None


@pytest.mark.asyncio  # type: ignore[misc]
async def test_duplicate_username_is_rejected() -> None:
    repo = InMemoryUserRepository()
    await repo.create(UserCreate(username="alice", password="pw"))

    with pytest.raises(UsernameTakenError):
        await repo.create(UserCreate(username="alice", password="other"))

    # Kein zweiter User angelegt, nächste ID bleibt unverbraucht
    carol = await repo.create(UserCreate(username="carol", password="pw"))
    assert carol.id == 2


# ---------------------------------------------------------------------------
# Products & Search
# ---------------------------------------------------------------------------


@pytest.mark.asyncio  # type: ignore[misc]
async def test_create_product_allocates_ids_in_order(
    product_repo: InMemoryProductRepository,
) -> None:
    first = await product_repo.create(_payload("A"))
    second = await product_repo.create(_payload("B"))

    assert (first.id, second.id) == (1, 2)
    assert first.is_reserved is False
    assert first.shipping_available is True
    assert [p.id for p in await product_repo.find_all()] == [1, 2]
    assert await product_repo.find_by_id(3) is None


@pytest.mark.asyncio  # type: ignore[misc]
async def test_search_empty_query_returns_all(product_repo: InMemoryProductRepository) -> None:
    await product_repo.create(_payload("A"))
    await product_repo.create(_payload("B"))

    all_products = await product_repo.find_all()
    assert await product_repo.search("") == all_products
    assert await product_repo.search(None) == all_products


@pytest.mark.asyncio  # type: ignore[misc]
async def test_search_matches_name_or_description_case_insensitive(
    product_repo: InMemoryProductRepository,
) -> None:
    await product_repo.create(_payload("Zelda Oracle of Ages"))
    await product_repo.create(_payload("Game Boy", description="Comes with ZELDA cartridge"))
    await product_repo.create(_payload("Wario Land 3"))

    results = await product_repo.search("zElDa")
    assert [p.id for p in results] == [1, 2]


@pytest.mark.asyncio  # type: ignore[misc]
async def test_search_handles_accented_text(product_repo: InMemoryProductRepository) -> None:
    await product_repo.create(_payload("Pokémon Azul (Blue)"))
    await product_repo.create(_payload("Pokemon Red"))

    results = await product_repo.search("POKÉMON")
    assert [p.name for p in results] == ["Pokémon Azul (Blue)"]


@pytest.mark.asyncio  # type: ignore[misc]
async def test_search_miss_returns_empty_list(product_repo: InMemoryProductRepository) -> None:
    await product_repo.create(_payload("Game Boy"))
    assert await product_repo.search("zzz-no-match") == []


@pytest.mark.asyncio  # type: ignore[misc]
async def test_search_results_are_subset_of_catalog() -> None:
    store = MarketplaceStore()
    await store.seed(with_sample_products=True)
    catalog = await store.products.find_all()

    for query in ["game", "Color", "lime", "!", "perfectly"]:
        results = await store.products.search(query)
        assert all(p in catalog for p in results)
        for p in results:
            haystack = p.name.lower() + " " + (p.description or "").lower()
            assert query.lower() in haystack


# ---------------------------------------------------------------------------
# Favorites
# ---------------------------------------------------------------------------


@pytest.mark.asyncio  # type: ignore[misc]
async def test_add_favorite_is_idempotent(favorite_repo: InMemoryFavoriteRepository) -> None:
    first = await favorite_repo.add(1, 1)
    second = await favorite_repo.add(1, 1)

    assert first == second
    assert first.id == 1
    assert len(await favorite_repo.find_by_user(1)) == 1


@pytest.mark.asyncio  # type: ignore[misc]
async def test_remove_unknown_favorite_returns_false(
    favorite_repo: InMemoryFavoriteRepository,
) -> None:
    assert await favorite_repo.remove(1, 1) is False
    assert await favorite_repo.find_by_user(1) == []


@pytest.mark.asyncio  # type: ignore[misc]
async def test_remove_after_add(favorite_repo: InMemoryFavoriteRepository) -> None:
    await favorite_repo.add(1, 5)
    await favorite_repo.add(1, 6)

    assert await favorite_repo.remove(1, 5) is True
    assert await favorite_repo.exists(1, 5) is False
    assert await favorite_repo.exists(1, 6) is True
    assert await favorite_repo.remove(1, 5) is False


@pytest.mark.asyncio  # type: ignore[misc]
async def test_favorite_ids_are_not_reused(favorite_repo: InMemoryFavoriteRepository) -> None:
    first = await favorite_repo.add(1, 1)
    await favorite_repo.remove(1, 1)
    again = await favorite_repo.add(1, 1)
    assert again.id == first.id + 1


@pytest.mark.asyncio  # type: ignore[misc]
async def test_find_by_user_keeps_insertion_order(
    favorite_repo: InMemoryFavoriteRepository,
) -> None:
    await favorite_repo.add(1, 3)
    await favorite_repo.add(2, 3)
    await favorite_repo.add(1, 1)

    assert [f.product_id for f in await favorite_repo.find_by_user(1)] == [3, 1]
    assert [f.product_id for f in await favorite_repo.find_by_user(2)] == [3]


@pytest.mark.asyncio  # type: ignore[misc]
async def test_count_by_products(favorite_repo: InMemoryFavoriteRepository) -> None:
    await favorite_repo.add(1, 3)
    await favorite_repo.add(2, 3)
    await favorite_repo.add(1, 1)

    assert await favorite_repo.count_by_products([1, 2, 3]) == {1: 1, 2: 0, 3: 2}


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


@pytest.mark.asyncio  # type: ignore[misc]
async def test_store_seed_loads_sample_products_and_demo_user() -> None:
    store = MarketplaceStore()
    await store.seed(with_sample_products=True, demo_user=UserCreate(username="demo", password="x"))

    products = await store.products.find_all()
    assert len(products) == len(SAMPLE_PRODUCTS) == 8
    assert products[0].name == "Pokémon Azul (Blue)"
    assert products[0].price == 2800
    assert products[3].is_reserved is True
    assert products[5].shipping_available is False

    demo = await store.users.find_by_username("demo")
    assert demo is not None
    assert demo.id == 1


@pytest.mark.asyncio  # type: ignore[misc]
async def test_store_without_seed_is_empty() -> None:
    store = MarketplaceStore()
    await store.seed(with_sample_products=False)
    assert await store.products.find_all() == []
    assert await store.users.find_by_id(1) is None
