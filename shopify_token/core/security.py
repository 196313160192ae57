"""Nonce generation and digest comparison."""

import hmac
import secrets

NONCE_BYTES = 16


def generate_nonce() -> str:
    """Generate a random 32-character hex nonce for the OAuth ``state``."""
    return secrets.token_hex(NONCE_BYTES)


def digests_equal(expected: bytes, received: bytes) -> bool:
    """Compare two digests in constant time.

    Unequal lengths are rejected up front; only the byte comparison itself
    has to be timing-safe.
    """
    if len(expected) != len(received):
        return False
    return hmac.compare_digest(expected, received)
