# src/marketplace/api/dependencies.py
from fastapi import Depends, Request

from marketplace.adapters.likes import FavoritesLikesCounter, RandomLikesCounter
from marketplace.core.config import Settings, get_settings
from marketplace.domain.models import LikesCountMode
from marketplace.domain.ports import LikesCountPort
from marketplace.repositories.store import MarketplaceStore
from marketplace.services.catalog_service import CatalogService
from marketplace.services.favorite_service import FavoriteService
from marketplace.services.user_service import UserService


def get_store(request: Request) -> MarketplaceStore:
    """Die im Lifespan erzeugte Store-Instanz der laufenden App."""
    store: MarketplaceStore = request.app.state.store
    return store


def get_likes_counter(
    store: MarketplaceStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> LikesCountPort:
    """Baut nur den über likes_count_mode gewählten Likes-Zähler."""
    if settings.likes_count_mode == LikesCountMode.RANDOM:
        return RandomLikesCounter(upper_bound=settings.random_likes_max)
    return FavoritesLikesCounter(repository=store.favorites)


def get_catalog_service(
    store: MarketplaceStore = Depends(get_store),
    likes_counter: LikesCountPort = Depends(get_likes_counter),
    settings: Settings = Depends(get_settings),
) -> CatalogService:
    return CatalogService(
        product_repository=store.products,
        favorite_repository=store.favorites,
        likes_counter=likes_counter,
        currency_symbol=settings.currency_symbol,
    )


def get_favorite_service(
    store: MarketplaceStore = Depends(get_store),
) -> FavoriteService:
    return FavoriteService(favorite_repository=store.favorites, product_repository=store.products)


def get_user_service(
    store: MarketplaceStore = Depends(get_store),
) -> UserService:
    return UserService(repository=store.users)
