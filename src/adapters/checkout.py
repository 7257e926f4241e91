"""Checkout redirect links.

The accounts service exposes `redirect-to-checkout`, a browser-navigable URL
that forwards the user to the payment provider for a given plan.
"""

from __future__ import annotations

import webbrowser
from typing import Callable
from urllib.parse import quote

from core.config import AppSettings
from core.domain.plans import SKU, PlanRegistry
from core.logging import get_logger

logger = get_logger(__name__)

# Characters encodeURIComponent leaves alone.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


class CheckoutLinkBuilder:
    def __init__(
        self,
        registry: PlanRegistry,
        settings: AppSettings | None = None,
        *,
        opener: Callable[[str], object] | None = None,
    ) -> None:
        self._registry = registry
        self._settings = settings or AppSettings()
        self._opener = opener or webbrowser.open_new_tab

    def build_url(self, email: str, sku: SKU) -> str:
        if sku not in self._registry:
            raise KeyError(f"Unknown plan: {sku!r}")

        return (
            f"{self._settings.accounts_api}/redirect-to-checkout"
            f"?email={encode_uri_component(email)}"
            f"&sku={sku}"
            f"&source={self._settings.checkout_source}"
            f"&returnUrl={encode_uri_component(self._settings.checkout_return_url)}"
        )

    def open_checkout(self, email: str, sku: SKU) -> None:
        url = self.build_url(email, sku)
        logger.info("checkout_opened", sku=sku)
        self._opener(url)
