"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation of the remote pricing payload at the edge.
- Plans carry their price state as a typed value instead of loose dicts.

Note:
- These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

PRICELESS = "priceless"


class PlanPrices(BaseModel):
    """Resolved prices for a plan, already formatted for display."""

    model_config = ConfigDict(frozen=True)

    currency: str = Field(
        ...,
        min_length=3,
        max_length=3,
        description="ISO 4217 currency code.",
    )
    monthly: str = Field(
        ...,
        description="Price per month, localized (annual plans divide the total by 12).",
    )
    total: str = Field(
        ...,
        description="Price per billing interval, localized.",
    )


PriceInfo = Union[PlanPrices, Literal["priceless"], None]


class SubscriptionPlan(BaseModel):
    """A purchasable subscription tier.

    `prices` is None while unresolved, a `PlanPrices` once priced, or the literal
    "priceless" for plans that never show a price (perpetual licenses).
    """

    model_config = ConfigDict(validate_assignment=True)

    paddle_id: int = Field(
        ...,
        frozen=True,
        description="Provider-assigned product id.",
    )
    name: str = Field(
        ...,
        min_length=1,
        frozen=True,
        description="Human-readable label.",
    )
    prices: PriceInfo = Field(
        default=None,
        description="Current price state.",
    )

    @property
    def is_priceless(self) -> bool:
        return self.prices == PRICELESS

    @property
    def is_priced(self) -> bool:
        return isinstance(self.prices, PlanPrices)

    @property
    def is_unresolved(self) -> bool:
        return self.prices is None


class ProductPriceAmount(BaseModel):
    model_config = ConfigDict(extra="ignore")

    net: float


class ProductSubscription(BaseModel):
    model_config = ConfigDict(extra="ignore")

    interval: str


class ProductPrice(BaseModel):
    """One entry of `response.products` in a `get-prices` answer."""

    model_config = ConfigDict(extra="ignore")

    product_id: int
    currency: str
    price: ProductPriceAmount
    subscription: ProductSubscription

    @property
    def total(self) -> float:
        return self.price.net

    @property
    def monthly(self) -> float:
        if self.subscription.interval == "year":
            return self.price.net / 12
        return self.price.net


class PricesResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Raw items: only products matching a known plan are validated as `ProductPrice`.
    products: list[Any] = Field(default_factory=list)


class PricesEnvelope(BaseModel):
    """Top-level `get-prices` body: `{success, response: {products}}`."""

    model_config = ConfigDict(extra="ignore")

    success: bool = False
    response: PricesResponse | None = None
