"""plan-prices CLI (Typer)."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from adapters.checkout import CheckoutLinkBuilder
from adapters.pricing_api import PriceLoader
from cli import doctor
from cli.ui_components import build_plans_table, print_banner
from core.config import AppSettings
from core.domain.plans import PlanRegistry, default_catalog
from core.logging import configure_logging
from core.services.price_resolution import RetryScheduler

app = typer.Typer(no_args_is_help=True, help="Subscription plan prices and checkout links.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log lookup attempts."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level, format_json=settings.log_json)


async def _resolve_prices(registry: PlanRegistry, settings: AppSettings) -> int:
    scheduler = RetryScheduler(
        registry,
        PriceLoader(registry, settings),
        timeout_seconds=settings.price_timeout_seconds,
        cooldown_seconds=settings.retry_cooldown_seconds,
    )
    return await scheduler.start()


@app.command()
def prices(
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the banner."),
) -> None:
    """Resolve prices for every plan (retrying until done) and print them."""

    settings = AppSettings()
    registry = default_catalog()

    if banner:
        print_banner(_console)

    with _console.status("Looking up prices..."):
        attempts = asyncio.run(_resolve_prices(registry, settings))

    _console.print(build_plans_table(registry))
    _console.print(f"[dim]Resolved after {attempts} attempt(s).[/dim]")


def _checkout_builder(sku: str) -> CheckoutLinkBuilder:
    registry = default_catalog()
    if sku not in registry:
        raise typer.BadParameter(f"unknown plan {sku!r}, expected one of: {', '.join(registry)}")
    return CheckoutLinkBuilder(registry, AppSettings())


@app.command(name="checkout-url")
def checkout_url(
    email: str = typer.Argument(..., help="Email of the purchasing account."),
    sku: str = typer.Argument(..., help="Plan SKU, e.g. pro-monthly."),
) -> None:
    """Print the checkout redirect URL for a plan."""

    typer.echo(_checkout_builder(sku).build_url(email, sku))


@app.command()
def checkout(
    email: str = typer.Argument(..., help="Email of the purchasing account."),
    sku: str = typer.Argument(..., help="Plan SKU, e.g. pro-monthly."),
) -> None:
    """Open the checkout page for a plan in the browser."""

    _checkout_builder(sku).open_checkout(email, sku)


def run() -> None:
    app()
