"""Price loader: accounts service `get-prices`.

Implementation:
- Collects the provider ids of every unresolved plan.
- One batch request: `GET {accounts_api}/get-prices?product_ids=1,2,3`.
- Writes formatted prices back into the registry.

Notes:
- Non-2xx => `HttpError`
- `success: false` or an unexpected body => `ServiceError`
- Unknown product ids in the answer are skipped.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import PlanPrices, PricesEnvelope, ProductPrice
from core.domain.plans import SKU, PlanRegistry
from core.errors import HttpError, NetworkError, ServiceError
from core.formatting import format_price
from core.interfaces.pricing import PriceSource
from core.logging import get_logger

logger = get_logger(__name__)


class PriceLoader(PriceSource):
    def __init__(
        self,
        registry: PlanRegistry,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._registry = registry
        self._settings = settings or AppSettings()
        self._transport = transport

    def prices_url(self, product_ids: list[int]) -> str:
        ids = ",".join(str(product_id) for product_id in product_ids)
        return f"{self._settings.accounts_api}/get-prices?product_ids={ids}"

    async def load(self) -> None:
        product_ids = self._registry.unresolved_ids()
        if not product_ids:
            logger.debug("price_lookup_skipped", reason="nothing_unresolved")
            return

        url = self.prices_url(product_ids)
        logger.debug("price_lookup_started", product_ids=product_ids)

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url)
        except httpx.RequestError as exc:
            raise NetworkError(f"Price lookup request failed: {exc!r}") from exc

        if not response.is_success:
            logger.warning(
                "price_lookup_http_error",
                status_code=response.status_code,
                body=response.text[:500],
            )
            raise HttpError(response.status_code, response.reason_phrase)

        try:
            data = response.json()
        except ValueError as exc:
            raise ServiceError("Price lookup returned invalid JSON", response.text[:500]) from exc

        try:
            envelope = PricesEnvelope.model_validate(data)
        except ValidationError as exc:
            raise ServiceError("Price lookup returned an unexpected payload", data) from exc

        if not envelope.success or envelope.response is None:
            logger.warning("price_lookup_unsuccessful", payload=data)
            raise ServiceError("Price lookup request was unsuccessful", data)

        resolved: dict[SKU, PlanPrices] = {}
        for raw in envelope.response.products:
            product_id = raw.get("product_id") if isinstance(raw, dict) else None
            sku = self._registry.get_sku(product_id) if isinstance(product_id, int) else None
            if sku is None:
                logger.debug("price_lookup_unknown_product", product_id=product_id)
                continue
            if self._registry[sku].is_priceless:
                continue

            try:
                resolved[sku] = self._to_prices(ProductPrice.model_validate(raw))
            except ValidationError as exc:
                raise ServiceError(f"Price lookup returned a malformed product for {sku}", raw) from exc

        # Nothing is written unless every matched product was usable.
        for sku, prices in resolved.items():
            self._registry.record_prices(sku, prices)

        logger.info("price_lookup_completed", updated=list(resolved))

    def _to_prices(self, product: ProductPrice) -> PlanPrices:
        locale = self._settings.price_locale
        return PlanPrices(
            currency=product.currency,
            total=format_price(product.currency, product.total, locale),
            monthly=format_price(product.currency, product.monthly, locale),
        )
