"""Pydantic schemas for credentials and token payloads."""

from shopify_token.schemas.common import BaseSchema
from shopify_token.schemas.shopify import (
    AccessTokenData,
    AssociatedUser,
    Credentials,
    OfflineAccessTokenData,
    OnlineAccessTokenData,
    parse_access_token_data,
)

__all__ = [
    "AccessTokenData",
    "AssociatedUser",
    "BaseSchema",
    "Credentials",
    "OfflineAccessTokenData",
    "OnlineAccessTokenData",
    "parse_access_token_data",
]
