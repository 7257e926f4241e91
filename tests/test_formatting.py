import pytest

from core.formatting import format_price


@pytest.mark.parametrize(
    ("currency", "amount", "expected"),
    [
        ("USD", 10, "$10"),
        ("USD", 10.0, "$10"),
        ("USD", 10.5, "$10.50"),
        ("USD", 1234.5, "$1,234.50"),
        ("USD", 100 / 12, "$8.33"),
        ("EUR", 7, "€7"),
    ],
)
def test_format_price_en_us(currency, amount, expected):
    assert format_price(currency, amount, locale="en_US") == expected


def test_format_price_follows_locale_conventions():
    rendered = format_price("EUR", 10.5, locale="de_DE")

    assert "10,50" in rendered
    assert "€" in rendered


def test_fraction_never_exceeds_two_digits():
    assert format_price("USD", 9.999, locale="en_US") == "$10.00"


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (121.5 / 12, "$10.13"),
        (10.125, "$10.13"),
        (0.005, "$0.01"),
    ],
)
def test_halves_round_away_from_zero(amount, expected):
    assert format_price("USD", amount, locale="en_US") == expected
