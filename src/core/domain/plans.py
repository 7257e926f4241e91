"""Subscription plan catalog.

The registry is built once per process (`default_catalog()`) and handed to the
components that need it: the price loader writes prices into it, everything
else only reads.
"""

from __future__ import annotations

from typing import Iterator, Literal, Mapping

from core.domain.models import PRICELESS, PlanPrices, SubscriptionPlan

SKU = Literal[
    "pro-monthly",
    "pro-annual",
    "pro-perpetual",
    "team-monthly",
    "team-annual",
]


class PlanRegistry:
    """Plans keyed by SKU, with lookups by provider id."""

    def __init__(self, plans: Mapping[str, SubscriptionPlan]) -> None:
        seen: dict[int, str] = {}
        for sku, plan in plans.items():
            if plan.paddle_id in seen:
                raise ValueError(
                    f"Duplicate plan id {plan.paddle_id} for {seen[plan.paddle_id]!r} and {sku!r}"
                )
            seen[plan.paddle_id] = sku
        self._plans: dict[str, SubscriptionPlan] = dict(plans)
        self._sku_by_id: dict[int, SKU] = seen  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._plans)

    def __iter__(self) -> Iterator[str]:
        return iter(self._plans)

    def __contains__(self, sku: object) -> bool:
        return sku in self._plans

    def __getitem__(self, sku: str) -> SubscriptionPlan:
        return self._plans[sku]

    def get(self, sku: str) -> SubscriptionPlan | None:
        return self._plans.get(sku)

    def items(self) -> list[tuple[str, SubscriptionPlan]]:
        return list(self._plans.items())

    def plans(self) -> list[SubscriptionPlan]:
        return list(self._plans.values())

    def get_sku(self, paddle_id: int | None) -> SKU | None:
        """Catalog key for a provider id, or None when no plan has that id."""

        if paddle_id is None:
            return None
        return self._sku_by_id.get(paddle_id)

    def find_by_paddle_id(self, paddle_id: int | None) -> SubscriptionPlan | None:
        sku = self.get_sku(paddle_id)
        return self._plans[sku] if sku is not None else None

    def unresolved_ids(self) -> list[int]:
        return [plan.paddle_id for plan in self._plans.values() if plan.is_unresolved]

    def has_unresolved(self) -> bool:
        # Priceless plans are never unresolved, so they never keep this true.
        return any(plan.is_unresolved for plan in self._plans.values())

    def is_fully_priced(self) -> bool:
        return not self.has_unresolved()

    def record_prices(self, sku: SKU, prices: PlanPrices) -> None:
        """Store freshly loaded prices. Only the price loader calls this."""

        plan = self._plans[sku]
        if plan.is_priceless:
            raise ValueError(f"Plan {sku!r} is priceless and cannot be priced")
        plan.prices = prices


def default_catalog() -> PlanRegistry:
    """Fresh registry with every known plan, all unresolved or priceless."""

    return PlanRegistry(
        {
            "pro-monthly": SubscriptionPlan(paddle_id=550380, name="Pro (monthly)"),
            "pro-annual": SubscriptionPlan(paddle_id=550382, name="Pro (annual)"),
            "pro-perpetual": SubscriptionPlan(
                paddle_id=599788, name="Pro (perpetual)", prices=PRICELESS
            ),
            "team-monthly": SubscriptionPlan(paddle_id=550789, name="Team (monthly)"),
            "team-annual": SubscriptionPlan(paddle_id=550788, name="Team (annual)"),
        }
    )
