"""Pytest configuration and fixtures for the shopify-token test suite.

Provides:
- A ShopifyToken built from the test credentials
- An independent reference implementation of Shopify's callback signing
- httpx clients backed by MockTransport for the token exchange
- Isolation of the cached settings and of root logger handlers
"""

import hashlib
import hmac
import logging
from collections.abc import AsyncGenerator, Callable, Generator
from typing import Any

import httpx
import pytest
import pytest_asyncio

from shopify_token import ShopifyToken
from shopify_token.core.config import get_settings
from shopify_token.core.logging_config import ExchangeIdFilter

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
TEST_SHARED_SECRET = "foo"
TEST_REDIRECT_URI = "bar"
TEST_API_KEY = "baz"
TEST_SHOP = "qux.myshopify.com"
TEST_CODE = "4d732838ad8c22cd1d2dd96f8a403fb7"
TEST_TOKEN = "f85632530bf277ec9ac6f649fc327f17"

Handler = Callable[[httpx.Request], Any]


@pytest.fixture
def shopify_token() -> ShopifyToken:
    """Client with the credentials used by Shopify's published test vector."""
    return ShopifyToken(
        api_key=TEST_API_KEY,
        shared_secret=TEST_SHARED_SECRET,
        redirect_uri=TEST_REDIRECT_URI,
    )


@pytest.fixture
def shopify_oauth_hmac() -> Callable[[dict[str, Any]], str]:
    """Generate a valid Shopify OAuth callback HMAC for query params.

    Written out longhand so the tests do not depend on the code under test.

    Usage:
        params = {"code": "abc", "shop": "store.myshopify.com", "state": "nonce123"}
        params["hmac"] = shopify_oauth_hmac(params)
    """

    def _escape(text: str, chars: str) -> str:
        out = []
        for char in text:
            out.append(f"%{ord(char):02X}" if char in chars else char)
        return "".join(out)

    def _compute(params: dict[str, Any]) -> str:
        pairs = []
        for key, value in params.items():
            if key in ("hmac", "signature"):
                continue
            if isinstance(value, list):
                value = "[" + ", ".join(f'"{v}"' for v in value) + "]"
            pairs.append(f"{_escape(key, '%&=')}={_escape(str(value), '%&')}")
        message = "&".join(sorted(pairs))
        return hmac.new(
            TEST_SHARED_SECRET.encode(),
            message.encode(),
            hashlib.sha256,
        ).hexdigest()

    return _compute


# ---------------------------------------------------------------------------
# HTTP mocking
# ---------------------------------------------------------------------------


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    """Requests that reached the mock transport, in order."""
    return []


@pytest_asyncio.fixture
async def mock_http(
    requests_seen: list[httpx.Request],
) -> AsyncGenerator[Callable[[Handler], httpx.AsyncClient], None]:
    """Build caller-owned AsyncClients whose requests go to a handler.

    Usage:
        client = mock_http(lambda request: httpx.Response(200, json={...}))
    """
    clients: list[httpx.AsyncClient] = []

    def _build(handler: Handler) -> httpx.AsyncClient:
        async def _record(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            response = handler(request)
            if not isinstance(response, httpx.Response):
                response = await response
            return response

        client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        clients.append(client)
        return client

    yield _build

    for client in clients:
        await client.aclose()


# ---------------------------------------------------------------------------
# Global state isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    """Drop the cached settings so env changes in one test do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Remove the handlers installed by setup_logging and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if any(isinstance(f, ExchangeIdFilter) for f in handler.filters):
            root.removeHandler(handler)
    root.setLevel(level)
