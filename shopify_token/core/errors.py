"""Error taxonomy for the Shopify OAuth helpers."""

from typing import Any


class ShopifyTokenError(Exception):
    """Base exception for all shopify-token errors."""

    code = "SHOPIFY_TOKEN_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dict suitable for structured logging."""
        return {"code": self.code, "message": self.message}


class ConfigurationError(ShopifyTokenError, ValueError):
    """A required credential is missing or an option is invalid."""

    code = "CONFIGURATION_ERROR"

    def __init__(self, message: str = "Missing or invalid options") -> None:
        super().__init__(message)


class ExchangeError(ShopifyTokenError):
    """The access token exchange failed.

    ``status_code`` and ``response_body`` are only set when Shopify answered
    with a complete response.
    """

    code = "EXCHANGE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.status_code is not None:
            data["status_code"] = self.status_code
        return data


class ExchangeTimeoutError(ExchangeError, TimeoutError):
    """The exchange did not complete before the deadline."""

    code = "TIMEOUT_ERROR"

    def __init__(self, message: str = "Request timed out") -> None:
        super().__init__(message)


class ExchangeTransportError(ExchangeError):
    """Network-level failure (DNS, connection reset, TLS...).

    The underlying ``httpx`` exception is chained as ``__cause__``.
    """

    code = "TRANSPORT_ERROR"


class RemoteError(ExchangeError):
    """Shopify answered with a status other than 200."""

    code = "REMOTE_ERROR"

    def __init__(
        self,
        status_code: int,
        response_body: str,
        message: str = "Failed to get Shopify access token",
    ) -> None:
        super().__init__(message, status_code=status_code, response_body=response_body)


class DecodeError(ExchangeError):
    """Shopify answered 200 but the body is not the expected JSON."""

    code = "DECODE_ERROR"

    def __init__(
        self,
        status_code: int,
        response_body: str,
        message: str = "Failed to parse the response body",
    ) -> None:
        super().__init__(message, status_code=status_code, response_body=response_body)
