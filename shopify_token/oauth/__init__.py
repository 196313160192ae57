"""Shopify OAuth helpers: authorization URL, callback HMAC, token exchange."""

from shopify_token.oauth.authorize import build_auth_url, shop_host
from shopify_token.oauth.exchange import exchange_code_for_token
from shopify_token.oauth.signature import canonical_query_string, sign_query, verify_hmac

__all__ = [
    "build_auth_url",
    "canonical_query_string",
    "exchange_code_for_token",
    "shop_host",
    "sign_query",
    "verify_hmac",
]
