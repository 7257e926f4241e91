"""Price lookup errors.

All three concrete errors mean the same thing to the retry loop: the attempt
failed, nothing was written, try again later.
"""

from __future__ import annotations

from typing import Any

from core.logging import get_logger

logger = get_logger(__name__)


class PriceLookupError(Exception):
    """Base class for a failed `get-prices` call."""


class NetworkError(PriceLookupError):
    """The request never produced an HTTP response."""


class HttpError(PriceLookupError):
    """The service answered with a non-success status."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        super().__init__(f"Failed to look up prices, got {status_code}: {reason}")
        self.status_code = status_code
        self.reason = reason


class ServiceError(PriceLookupError):
    """The response was delivered but flagged (or shaped) as a failure."""

    def __init__(self, message: str, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


def report_error(exc: BaseException) -> None:
    """Default error-reporting hook: log and carry on."""

    logger.error(
        "price_lookup_failed",
        error_type=type(exc).__name__,
        error=str(exc),
        exc_info=exc,
    )
