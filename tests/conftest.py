# tests/conftest.py
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from marketplace.core.config import Settings, get_settings
from marketplace.main import app
from marketplace.repositories.favorite_repository import InMemoryFavoriteRepository
from marketplace.repositories.product_repository import InMemoryProductRepository


@pytest.fixture
def test_settings() -> Settings:
    return Settings(likes_count_mode="favorites", currency_symbol="€")


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    # Jeder TestClient-Kontext durchläuft den Lifespan und bekommt einen frischen,
    # mit den Beispielprodukten und dem Demo-User (id=1) befüllten Store.
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            yield c
    finally:
        app.dependency_overrides.pop(get_settings, None)


@pytest.fixture
def product_repo() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def favorite_repo() -> InMemoryFavoriteRepository:
    return InMemoryFavoriteRepository()
