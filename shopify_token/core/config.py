"""Configuration using Pydantic settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SCOPES = "read_content"
DEFAULT_TIMEOUT_SECONDS = 60.0


class ShopifySettings(BaseSettings):
    """Shopify app settings loaded from ``SHOPIFY_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SHOPIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App credentials (Shopify Partners dashboard)
    api_key: str = ""
    shared_secret: str = ""
    redirect_uri: str = ""

    # OAuth defaults
    scopes: str = DEFAULT_SCOPES
    access_mode: str = ""  # "" = offline, "per-user" = online

    # Token exchange deadline in seconds
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)


@lru_cache
def get_settings() -> ShopifySettings:
    """Get cached settings instance."""
    return ShopifySettings()
