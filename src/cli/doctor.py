"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show the active configuration and check the pricing endpoint."""

    settings = AppSettings()

    table = Table(title="plan-prices Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Accounts API", "OK", settings.accounts_api)
    table.add_row("Attempt timeout", "OK", f"{settings.price_timeout_seconds:g}s")
    table.add_row("Retry cooldown", "OK", f"{settings.retry_cooldown_seconds:g}s")
    table.add_row("Price locale", "OK", settings.price_locale or "process default")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(
        _check_http(f"{settings.accounts_api}/get-prices?product_ids=", settings)
    )
    table.add_row("Pricing endpoint", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="set-api")
def set_api(url: str = typer.Argument(..., help="Base URL of the accounts service.")) -> None:
    """Persist the accounts API base URL in the user config .env."""

    url = url.strip()
    if not url.startswith(("http://", "https://")):
        raise typer.BadParameter("url must start with http:// or https://")

    env_path = write_user_env_vars({"ACCOUNTS_API": url.rstrip("/")})
    _console.print(f"[green]Saved accounts API to:[/green] {env_path}")
