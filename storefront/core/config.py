"""Storefront Configuration"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Storefront Cart"
    debug: bool = True
    host: str = "0.0.0.0"
    port: int = 8001
    cors_origins: list[str] = ["*"]

    # Pricing
    currency_symbol: str = "$"
    # Floor the payable total at zero when a flat discount exceeds the order
    clamp_negative_total: bool = True
    default_shipping_id: str = "standard"

    # Sessions and snapshots
    saved_cart_key: str = "savedCart"
    session_max_age_hours: int = 24


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
