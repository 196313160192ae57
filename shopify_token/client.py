"""High level client bundling credentials with the OAuth helpers."""

from collections.abc import Mapping, Sequence
from typing import Any

import httpx
from pydantic import ValidationError

from shopify_token.core.config import (
    DEFAULT_SCOPES,
    DEFAULT_TIMEOUT_SECONDS,
    ShopifySettings,
    get_settings,
)
from shopify_token.core.errors import ConfigurationError
from shopify_token.core.security import generate_nonce
from shopify_token.oauth.authorize import build_auth_url
from shopify_token.oauth.exchange import exchange_code_for_token
from shopify_token.oauth.signature import verify_hmac
from shopify_token.schemas.shopify import Credentials


class ShopifyToken:
    """Shopify OAuth client for one app.

    Usage::

        shopify_token = ShopifyToken(
            api_key="...", shared_secret="...", redirect_uri="https://app/callback"
        )
        nonce = shopify_token.generate_nonce()
        url = shopify_token.generate_auth_url("my-store", nonce=nonce)
        # ... merchant approves, Shopify redirects back ...
        if shopify_token.verify_hmac(query):
            data = await shopify_token.get_access_token(query["shop"], query["code"])
    """

    def __init__(
        self,
        api_key: str | None = None,
        shared_secret: str | None = None,
        redirect_uri: str | None = None,
        *,
        scopes: str | Sequence[str] = DEFAULT_SCOPES,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        access_mode: str = "",
        client: httpx.AsyncClient | None = None,
        token_only: bool = False,
    ) -> None:
        try:
            self.credentials = Credentials(
                api_key=api_key,  # type: ignore[arg-type]
                shared_secret=shared_secret,  # type: ignore[arg-type]
                redirect_uri=redirect_uri,  # type: ignore[arg-type]
            )
        except ValidationError as exc:
            raise ConfigurationError() from exc

        if timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {timeout!r}")

        self.scopes = scopes
        self.timeout = timeout
        self.access_mode = access_mode
        self.client = client
        self.token_only = token_only

    @classmethod
    def from_settings(
        cls, settings: ShopifySettings | None = None, **overrides: Any
    ) -> "ShopifyToken":
        """Create a client from ``SHOPIFY_*`` settings.

        Keyword overrides take precedence over the settings values.
        """
        settings = settings or get_settings()
        options: dict[str, Any] = {
            "api_key": settings.api_key,
            "shared_secret": settings.shared_secret,
            "redirect_uri": settings.redirect_uri,
            "scopes": settings.scopes,
            "timeout": settings.timeout,
            "access_mode": settings.access_mode,
        }
        options.update(overrides)
        return cls(**options)

    @property
    def api_key(self) -> str:
        return self.credentials.api_key

    @property
    def redirect_uri(self) -> str:
        return self.credentials.redirect_uri

    def generate_nonce(self) -> str:
        """Generate a random nonce."""
        return generate_nonce()

    def generate_auth_url(
        self,
        shop: str,
        scopes: str | Sequence[str] | None = None,
        nonce: str | None = None,
        access_mode: str | None = None,
    ) -> str:
        """Build the authorization URL, falling back to the client defaults."""
        return build_auth_url(
            shop,
            api_key=self.credentials.api_key,
            redirect_uri=self.credentials.redirect_uri,
            scopes=scopes or self.scopes,
            nonce=nonce or self.generate_nonce(),
            access_mode=self.access_mode if access_mode is None else access_mode,
        )

    def verify_hmac(self, query: Mapping[str, Any]) -> bool:
        """Verify the hmac of an OAuth callback query."""
        return verify_hmac(query, self.credentials.shared_secret)

    async def get_access_token(self, shop: str, code: str) -> Any:
        """Request an access token.

        Args:
            shop: The hostname of the shop, e.g. ``foo.myshopify.com``.
            code: The authorization code.

        Returns:
            The token payload (``access_token``, ``scope`` and, for online
            tokens, ``expires_in``, ``associated_user_scope`` and
            ``associated_user``), or the bare token when ``token_only``.
        """
        return await exchange_code_for_token(
            shop,
            code,
            credentials=self.credentials,
            timeout=self.timeout,
            client=self.client,
            token_only=self.token_only,
        )

    def __repr__(self) -> str:
        return f"ShopifyToken(api_key={self.api_key!r}, redirect_uri={self.redirect_uri!r})"
