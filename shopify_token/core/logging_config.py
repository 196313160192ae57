"""JSON logging setup and per-exchange correlation ids.

The library only emits records through module loggers. Applications that want
the JSON output call :func:`setup_logging` once at startup.
"""

import contextlib
import contextvars
import logging
import uuid
from collections.abc import Iterator
from typing import IO

from pythonjsonlogger.json import JsonFormatter

exchange_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("exchange_id", default="")


class ExchangeIdFilter(logging.Filter):
    """Tag every record with the id of the token exchange in progress."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.exchange_id = exchange_id_var.get("")  # type: ignore[attr-defined]
        return True


def setup_logging(*, debug: bool = False, stream: IO[str] | None = None) -> None:
    """Send root logger output through a JSON formatter carrying exchange_id."""
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s %(exchange_id)s",
            rename_fields={"asctime": "timestamp", "levelname": "level"},
        )
    )
    handler.addFilter(ExchangeIdFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)


def generate_exchange_id() -> str:
    return uuid.uuid4().hex[:16]


@contextlib.contextmanager
def exchange_context(exchange_id: str | None = None) -> Iterator[str]:
    """Bind an exchange id to the current context for the block's duration."""
    token = exchange_id_var.set(exchange_id or generate_exchange_id())
    try:
        yield exchange_id_var.get()
    finally:
        exchange_id_var.reset(token)
