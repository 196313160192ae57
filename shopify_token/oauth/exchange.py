"""Exchange an OAuth authorization code for a Shopify access token."""

import asyncio
import contextlib
import json
import logging
from typing import Any

import httpx

from shopify_token.core.config import DEFAULT_TIMEOUT_SECONDS
from shopify_token.core.errors import (
    DecodeError,
    ExchangeTimeoutError,
    ExchangeTransportError,
    RemoteError,
)
from shopify_token.core.logging_config import exchange_context
from shopify_token.schemas.shopify import Credentials

logger = logging.getLogger(__name__)

ACCESS_TOKEN_PATH = "/admin/oauth/access_token"


def _request_body(credentials: Credentials, code: str) -> bytes:
    return json.dumps(
        {
            "client_secret": credentials.shared_secret,
            "client_id": credentials.api_key,
            "code": code,
        },
        ensure_ascii=False,
        separators=(",", ":"),
    ).encode("utf-8")


async def _post(client: httpx.AsyncClient, url: str, body: bytes) -> tuple[int, str]:
    """Send the request and buffer the whole response body."""
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "Content-Length": str(len(body)),
    }
    async with client.stream("POST", url, content=body, headers=headers) as response:
        raw = await response.aread()
    return response.status_code, raw.decode("utf-8", errors="replace")


async def exchange_code_for_token(
    shop: str,
    code: str,
    *,
    credentials: Credentials,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    client: httpx.AsyncClient | None = None,
    token_only: bool = False,
) -> Any:
    """Exchange the OAuth authorization code for an access token.

    The deadline covers connecting, receiving the headers and reading the
    full body. On expiry the in-flight request is cancelled, which closes the
    response and hands the connection back to the pool.

    Args:
        shop: The shop hostname, e.g. ``my-store.myshopify.com``.
        code: The authorization code from the OAuth callback.
        credentials: The app credentials.
        timeout: Deadline for the whole exchange, in seconds.
        client: Optional caller-owned client (connection pool, proxies,
            transport). It is used as-is and left open.
        token_only: Return only the ``access_token`` string instead of the
            whole payload.

    Returns:
        The parsed JSON payload, or the access token when ``token_only``.

    Raises:
        ExchangeTimeoutError: If the exchange did not finish in time.
        ExchangeTransportError: If the connection failed.
        RemoteError: If Shopify answered with a status other than 200.
        DecodeError: If the 200 response body is not valid JSON.
    """
    url = f"https://{shop}{ACCESS_TOKEN_PATH}"
    body = _request_body(credentials, code)

    with exchange_context():
        logger.debug("Requesting access token from %s", shop)

        async with contextlib.AsyncExitStack() as stack:
            if client is None:
                client = await stack.enter_async_context(httpx.AsyncClient(timeout=timeout))

            try:
                async with asyncio.timeout(timeout):
                    status, text = await _post(client, url, body)
            except (TimeoutError, httpx.TimeoutException) as exc:
                logger.warning("Access token request to %s timed out after %ss", shop, timeout)
                raise ExchangeTimeoutError() from exc
            except httpx.RequestError as exc:
                logger.warning("Access token request to %s failed: %s", shop, exc)
                raise ExchangeTransportError(str(exc)) from exc

        if status != 200:
            logger.warning("Access token request to %s returned %s", shop, status)
            raise RemoteError(status, text)

        try:
            payload = json.loads(text)
        except (ValueError, RecursionError) as exc:
            logger.warning("Access token response from %s is not valid JSON", shop)
            raise DecodeError(status, text) from exc

        logger.info("Obtained access token for %s", shop)

        if not token_only:
            return payload

        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(token, str):
            raise DecodeError(status, text, "Response body has no access_token")
        return token
