# src/marketplace/repositories/store.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from marketplace.domain.models import ProductCreate, UserCreate
from marketplace.repositories.base import (
    AbstractFavoriteRepository,
    AbstractProductRepository,
    AbstractUserRepository,
)
from marketplace.repositories.favorite_repository import InMemoryFavoriteRepository
from marketplace.repositories.product_repository import InMemoryProductRepository
from marketplace.repositories.user_repository import InMemoryUserRepository

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS: list[ProductCreate] = [
    ProductCreate(
        name="Pokémon Azul (Blue)",
        price=2800,
        description="Original Pokémon Blue game cartridge in good condition",
        image_url="https://ucarecdn.com/39608923-c501-4d19-8c28-031c7c12ba4a/-/preview/500x500/",
    ),
    ProductCreate(
        name="Gameboy Color Transparent",
        price=9000,
        description="Transparent Game Boy Color in excellent working condition",
        image_url="https://ucarecdn.com/6cef62fc-ac44-4a30-9499-e714750edbea/-/resize/500x500/",
    ),
    ProductCreate(
        name="Game Boy Color (Lime Green)",
        price=7000,
        description="Lime Green Game Boy Color, minor scratches but works perfectly",
        image_url=(
            "https://upload.wikimedia.org/wikipedia/commons/thumb/3/35/"
            "Nintendo_gameboy_color_lime_green.jpg/220px-Nintendo_gameboy_color_lime_green.jpg"
        ),
    ),
    ProductCreate(
        name="Game Boy Color Transparent Purple",
        price=2500,
        description="Transparent Purple Game Boy Color with slight discoloration",
        image_url="https://ucarecdn.com/39608923-c501-4d19-8c28-031c7c12ba4a/-/resize/500x500/",
        is_reserved=True,
    ),
    ProductCreate(
        name="Zelda Oracle of Ages - GBC",
        price=4500,
        description=(
            "The Legend of Zelda: Oracle of Ages for Game Boy Color - EU version, complete in "
            "box with manual. Perfect condition and tested working. "
            "A must-have for any Zelda collector!"
        ),
        image_url="https://i.imgur.com/15wbN0e.jpg",
    ),
    ProductCreate(
        name="Super Mario Land 2 - Game Boy",
        price=3200,
        description=(
            "Super Mario Land 2: 6 Golden Coins for original Game Boy. Authentic cartridge in "
            "excellent condition. Battery save still works perfectly!"
        ),
        image_url="https://i.imgur.com/WXueBVn.jpg",
        shipping_available=False,
    ),
    ProductCreate(
        name="Game Boy Color - Lime Green",
        price=6500,
        description=(
            "Original Nintendo Game Boy Color in lime green. Console is in great condition with "
            "minor signs of use. All buttons responsive, screen is clear with no dead pixels. "
            "Battery cover intact."
        ),
        image_url="https://i.imgur.com/OpK0mEm.jpg",
    ),
    ProductCreate(
        name="Wario Land 3 - Game Boy Color",
        price=3800,
        description=(
            "Wario Land 3 for Game Boy Color - Japanese version but plays in any GBC. Cart only, "
            "tested and working perfectly. Label in excellent condition with vibrant colors."
        ),
        image_url="https://i.imgur.com/91DLVCa.jpg",
        is_reserved=True,
    ),
]


@dataclass
class MarketplaceStore:
    """
    Hält die drei Collections einer App-Instanz.
    Wird im Lifespan erzeugt und über app.state an die Dependencies gereicht.
    """

    users: AbstractUserRepository = field(default_factory=InMemoryUserRepository)
    products: AbstractProductRepository = field(default_factory=InMemoryProductRepository)
    favorites: AbstractFavoriteRepository = field(default_factory=InMemoryFavoriteRepository)

    async def seed(self, with_sample_products: bool, demo_user: UserCreate | None = None) -> None:
        if demo_user is not None:
            await self.users.create(demo_user)
        if with_sample_products:
            for payload in SAMPLE_PRODUCTS:
                await self.products.create(payload)
            logger.info("Seeded %d sample products", len(SAMPLE_PRODUCTS))
