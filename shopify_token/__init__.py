"""Shopify OAuth helpers: authorization URL, callback HMAC verification and
access token exchange."""

from shopify_token.client import ShopifyToken
from shopify_token.core.errors import (
    ConfigurationError,
    DecodeError,
    ExchangeError,
    ExchangeTimeoutError,
    ExchangeTransportError,
    RemoteError,
    ShopifyTokenError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "ExchangeError",
    "ExchangeTimeoutError",
    "ExchangeTransportError",
    "RemoteError",
    "ShopifyToken",
    "ShopifyTokenError",
]
