"""Authorization URL builder for the Shopify OAuth flow."""

from collections.abc import Sequence
from urllib.parse import quote, urlencode

SHOP_DOMAIN_SUFFIX = ".myshopify.com"
AUTHORIZE_PATH = "/admin/oauth/authorize"
ACCESS_MODE_PARAM = "grant_options[]"

# Characters encodeURIComponent leaves alone besides [A-Za-z0-9_.~-]
_URI_COMPONENT_SAFE = "!'()*"


def shop_host(shop: str) -> str:
    """Return the shop's hostname, appending ``.myshopify.com`` when missing."""
    if shop.endswith(SHOP_DOMAIN_SUFFIX):
        return shop
    return f"{shop}{SHOP_DOMAIN_SUFFIX}"


def format_scopes(scopes: str | Sequence[str]) -> str:
    """Join a scope list into Shopify's comma separated form."""
    if isinstance(scopes, str):
        return scopes
    return ",".join(scopes)


def build_auth_url(
    shop: str,
    *,
    api_key: str,
    redirect_uri: str,
    scopes: str | Sequence[str],
    nonce: str,
    access_mode: str = "",
) -> str:
    """Build the Shopify OAuth authorization URL.

    Args:
        shop: The shop name (``my-store``) or domain (``my-store.myshopify.com``).
        api_key: The app's API key, sent as ``client_id``.
        redirect_uri: Where Shopify sends the merchant after consent.
        scopes: Comma separated string or list of access scopes.
        nonce: Random state parameter for CSRF protection.
        access_mode: ``per-user`` for online tokens, empty for offline ones.

    Returns:
        The full authorization URL to redirect the merchant to.
    """
    query = {
        "scope": format_scopes(scopes),
        "state": nonce,
        "redirect_uri": redirect_uri,
        "client_id": api_key,
    }
    if access_mode:
        query[ACCESS_MODE_PARAM] = access_mode

    params = urlencode(query, safe=_URI_COMPONENT_SAFE, quote_via=quote)
    return f"https://{shop_host(shop)}{AUTHORIZE_PATH}?{params}"
