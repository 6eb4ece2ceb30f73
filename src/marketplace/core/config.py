# src/marketplace/core/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from marketplace.domain.models import LikesCountMode


class Settings(BaseSettings):
    # App
    app_name: str = "Marketplace API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = Field(default=["*"])

    # Katalog
    currency_symbol: str = "€"
    seed_sample_products: bool = True

    # Feste Demo-Identität (keine Authentifizierung). Leer = kein Demo-User.
    demo_username: str | None = "demo"
    demo_password: str = "demo"

    # Likes-Zähler im Read-Model: echte Favoriten-Anzahl oder Zufallswert (Demo)
    likes_count_mode: LikesCountMode = LikesCountMode.FAVORITES
    random_likes_max: int = Field(default=50, ge=0)

    # Rate Limiting
    rate_limit_enabled: bool = True
    rate_limit_requests: int = 1000
    rate_limit_window_seconds: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
