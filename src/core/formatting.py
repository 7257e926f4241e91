"""Localized price rendering (Babel)."""

from __future__ import annotations

import copy
import decimal

from babel import Locale, default_locale

FALLBACK_LOCALE = "en_US"


def _resolve_locale(locale: str | None) -> Locale:
    return Locale.parse(locale or default_locale("LC_NUMERIC") or FALLBACK_LOCALE)


def format_price(currency: str, amount: float, locale: str | None = None) -> str:
    """Render `amount` in `currency` for display.

    Whole amounts drop the fraction ("$10"); anything else shows exactly two
    digits ("$10.50"). `locale` defaults to the process locale.
    """

    loc = _resolve_locale(locale)
    min_digits = 0 if round(amount) == amount else 2

    pattern = copy.copy(loc.currency_formats["standard"])
    pattern.frac_prec = (min_digits, 2)
    # Halves round away from zero (10.125 -> 10.13), like browser number formatting.
    with decimal.localcontext() as ctx:
        ctx.rounding = decimal.ROUND_HALF_UP
        return pattern.apply(amount, loc, currency=currency, currency_digits=False)
