from typing import get_args

import pytest
from pydantic import ValidationError

from core.domain.models import PRICELESS, PlanPrices, SubscriptionPlan
from core.domain.plans import SKU, PlanRegistry


def _prices(total: str = "$10") -> PlanPrices:
    return PlanPrices(currency="USD", monthly=total, total=total)


def test_default_catalog_contents(registry):
    assert list(registry) == [
        "pro-monthly",
        "pro-annual",
        "pro-perpetual",
        "team-monthly",
        "team-annual",
    ]
    assert registry["pro-annual"].paddle_id == 550382
    assert registry["team-monthly"].name == "Team (monthly)"
    assert registry["pro-perpetual"].is_priceless
    assert all(plan.is_unresolved for sku, plan in registry.items() if sku != "pro-perpetual")


def test_unresolved_ids_skip_priceless_plans(registry):
    assert registry.unresolved_ids() == [550380, 550382, 550789, 550788]


def test_get_sku_by_paddle_id(registry):
    assert registry.get_sku(550788) == "team-annual"
    assert registry.get_sku(123) is None
    assert registry.get_sku(None) is None


def test_find_by_paddle_id(registry):
    assert registry.find_by_paddle_id(550380) is registry["pro-monthly"]
    assert registry.find_by_paddle_id(42) is None


def test_duplicate_ids_are_rejected():
    with pytest.raises(ValueError, match="Duplicate plan id"):
        PlanRegistry(
            {
                "a": SubscriptionPlan(paddle_id=1, name="A"),
                "b": SubscriptionPlan(paddle_id=1, name="B"),
            }
        )


def test_record_prices_and_loop_condition(registry):
    assert registry.has_unresolved()
    for sku in ("pro-monthly", "pro-annual", "team-monthly", "team-annual"):
        registry.record_prices(sku, _prices())

    assert not registry.has_unresolved()
    assert registry.is_fully_priced()
    assert registry["pro-perpetual"].prices == PRICELESS


def test_record_prices_overwrites_previous_value(registry):
    registry.record_prices("pro-monthly", _prices("$10"))
    registry.record_prices("pro-monthly", _prices("$12"))

    assert registry["pro-monthly"].prices.total == "$12"


def test_priceless_plan_cannot_be_priced(registry):
    with pytest.raises(ValueError, match="priceless"):
        registry.record_prices("pro-perpetual", _prices())

    assert registry["pro-perpetual"].is_priceless


def test_plan_identity_is_immutable(registry):
    with pytest.raises(ValidationError):
        registry["pro-monthly"].paddle_id = 1
    with pytest.raises(ValidationError):
        registry["pro-monthly"].name = "Renamed"


def test_unknown_sku_lookup(registry):
    assert registry.get("enterprise") is None
    assert "enterprise" not in registry
    with pytest.raises(KeyError):
        registry["enterprise"]


def test_sku_type_lists_every_catalog_key(registry):
    assert set(get_args(SKU)) == set(registry)
    assert {registry.get_sku(plan.paddle_id) for plan in registry.plans()} == set(get_args(SKU))
