# src/marketplace/domain/models.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------


class LikesCountMode(StrEnum):
    FAVORITES = "favorites"
    RANDOM = "random"


def format_price(price_cents: int, currency_symbol: str = "€") -> str:
    """
    Rendert einen Cent-Betrag als ganze Währungseinheit, z.B. 2800 -> "€28".
    Nachkommastellen werden kaufmännisch gerundet (9999 -> "€100").
    """
    units = (Decimal(price_cents) / Decimal("100")).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{currency_symbol}{units}"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


class User(BaseModel):
    id: int
    username: str = Field(min_length=1, max_length=64)
    password: str

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}


class Product(BaseModel):
    """Ein Inserat im Katalog. Preise werden immer in Cent gespeichert."""

    id: int
    name: str = Field(min_length=1, max_length=512)
    price: int = Field(ge=0, description="Preis in Cent")
    description: str | None = None
    image_url: str
    is_reserved: bool = False
    shipping_available: bool = True

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}


class Favorite(BaseModel):
    id: int
    user_id: int
    product_id: int

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}


# ---------------------------------------------------------------------------
# Read-Model
# ---------------------------------------------------------------------------


class ProductResponse(Product):
    """
    Pro Request berechnete Sicht auf ein Produkt.
    Wird nie gespeichert.
    """

    formatted_price: str
    is_favorited: bool = False
    likes_count: int = Field(default=0, ge=0)


# ---------------------------------------------------------------------------
# API Request/Response Schemas
# ---------------------------------------------------------------------------


class UserCreate(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1)

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class UserPublic(BaseModel):
    id: int
    username: str

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=512)
    price: int = Field(ge=0)
    description: str | None = None
    image_url: str
    is_reserved: bool = False
    shipping_available: bool = True

    @field_validator("description")
    @classmethod
    def blank_description_is_none(cls, value: str | None) -> str | None:
        return value or None

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}


class FavoriteRequest(BaseModel):
    # Beide Felder optional: fehlende Werte werden im Router als 400 gemeldet.
    user_id: int | None = None
    product_id: int | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class FavoriteAddedResponse(BaseModel):
    success: bool = True
    message: str
    favorite: Favorite

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class FavoriteRemovedResponse(BaseModel):
    success: bool = True
    message: str

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
