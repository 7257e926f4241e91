import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.as_posix() not in sys.path:
    sys.path.insert(0, SRC.as_posix())

from core.config import AppSettings  # noqa: E402
from core.domain.plans import PlanRegistry, default_catalog  # noqa: E402

ACCOUNTS_API = "https://accounts.example.test/api"


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        accounts_api=ACCOUNTS_API,
        price_locale="en_US",
    )


@pytest.fixture
def registry() -> PlanRegistry:
    return default_catalog()


def product(product_id: int, net: float, interval: str = "month", currency: str = "USD") -> dict[str, Any]:
    return {
        "product_id": product_id,
        "currency": currency,
        "price": {"net": net, "gross": net},
        "subscription": {"interval": interval, "frequency": 1},
    }


def prices_payload(*products: dict[str, Any], success: bool = True) -> dict[str, Any]:
    return {"success": success, "response": {"products": list(products)}}


@pytest.fixture
def mock_transport() -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport that records every request it serves."""

    def _build(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        transport = httpx.MockTransport(_record)
        transport.requests = requests  # type: ignore[attr-defined]
        return transport

    return _build
