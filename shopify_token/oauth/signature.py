"""Shopify OAuth callback HMAC verification.

Shopify signs the callback query by HMAC-SHA256 over a canonical string:
every parameter except ``hmac`` and the legacy ``signature``, with keys and
values escaped, rendered as ``key=value``, sorted and joined with ``&``.
"""

import hashlib
import hmac
import logging
import re
from collections.abc import Mapping
from typing import Any

from shopify_token.core.security import digests_equal

logger = logging.getLogger(__name__)

EXCLUDED_KEYS = frozenset({"hmac", "signature"})

_HEX_DIGEST_RE = re.compile(r"[0-9a-fA-F]{64}")

_KEY_ESCAPES = str.maketrans({"%": "%25", "&": "%26", "=": "%3D"})
_VALUE_ESCAPES = str.maketrans({"%": "%25", "&": "%26"})


def _render_value(value: Any) -> str:
    # Repeated query keys arrive as lists; Shopify signs them as ["a", "b"]
    if isinstance(value, list | tuple):
        return "[" + ", ".join(f'"{item}"' for item in value) + "]"
    return str(value)


def canonical_query_string(query: Mapping[str, Any]) -> str:
    """Build the string Shopify signs for a callback query."""
    pairs = sorted(
        f"{str(key).translate(_KEY_ESCAPES)}={_render_value(value).translate(_VALUE_ESCAPES)}"
        for key, value in query.items()
        if key not in EXCLUDED_KEYS
    )
    return "&".join(pairs)


def _digest(query: Mapping[str, Any], secret: str) -> bytes:
    return hmac.new(
        secret.encode("utf-8"),
        canonical_query_string(query).encode("utf-8"),
        hashlib.sha256,
    ).digest()


def sign_query(query: Mapping[str, Any], secret: str) -> str:
    """Compute the hex HMAC Shopify would attach to ``query``."""
    return _digest(query, secret).hex()


def verify_hmac(query: Mapping[str, Any], secret: str) -> bool:
    """Verify Shopify OAuth callback HMAC signature.

    Any malformed input (not a mapping, missing ``hmac``, ``hmac`` that is not
    a 64-char hex string, text that cannot be encoded as UTF-8) is reported as
    not authentic instead of raising.

    Args:
        query: All query parameters from the callback URL.
        secret: The app's shared secret.

    Returns:
        True if HMAC is valid.
    """
    if not isinstance(query, Mapping):
        return False

    received = query.get("hmac")
    if not isinstance(received, str) or not _HEX_DIGEST_RE.fullmatch(received):
        logger.debug("Rejecting callback query without a well-formed hmac")
        return False

    try:
        expected = _digest(query, secret)
    except UnicodeEncodeError:
        logger.debug("Rejecting callback query that is not encodable as UTF-8")
        return False

    return digests_equal(expected, bytes.fromhex(received))
