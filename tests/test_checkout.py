import pytest

from adapters.checkout import CheckoutLinkBuilder, encode_uri_component
from conftest import ACCOUNTS_API


def test_build_url(registry, settings):
    builder = CheckoutLinkBuilder(registry, settings)

    url = builder.build_url("jo+test@example.com", "pro-annual")

    assert url == (
        f"{ACCOUNTS_API}/redirect-to-checkout"
        "?email=jo%2Btest%40example.com"
        "&sku=pro-annual"
        "&source=app.httptoolkit.tech"
        "&returnUrl=https%3A%2F%2Fhttptoolkit.com%2Fapp-purchase-thank-you%2F"
    )


def test_encode_uri_component_matches_browser_rules():
    assert encode_uri_component("a b&c=d/é") == "a%20b%26c%3Dd%2F%C3%A9"
    assert encode_uri_component("keep-_.!~*'()") == "keep-_.!~*'()"


def test_unknown_plan_is_rejected(registry, settings):
    with pytest.raises(KeyError):
        CheckoutLinkBuilder(registry, settings).build_url("a@b.c", "enterprise")


def test_open_checkout_hands_url_to_opener(registry, settings):
    opened: list[str] = []
    builder = CheckoutLinkBuilder(registry, settings, opener=opened.append)

    builder.open_checkout("a@b.c", "team-monthly")

    assert opened == [builder.build_url("a@b.c", "team-monthly")]


def test_checkout_does_not_depend_on_prices(registry, settings):
    assert registry["team-annual"].is_unresolved
    assert "sku=team-annual" in CheckoutLinkBuilder(registry, settings).build_url("a@b.c", "team-annual")
