"""CLI UI components (Rich).

Why separate components:
- Avoids mixing command logic with visual details.
- Lets several commands reuse the same tables/panels.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.plans import PlanRegistry


def print_banner(console: Console) -> None:
    title = Text("plan-prices", style="bold cyan")
    subtitle = Text("Subscription prices • Checkout links", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_plans_table(registry: PlanRegistry) -> Table:
    """Table of every plan with its current price state."""

    table = Table(title="Subscription Plans")
    table.add_column("SKU", style="cyan", no_wrap=True)
    table.add_column("Plan", style="white")
    table.add_column("Monthly", style="green", justify="right")
    table.add_column("Total", style="green", justify="right")
    table.add_column("Currency", style="magenta")

    for sku, plan in registry.items():
        if plan.is_priced:
            table.add_row(sku, plan.name, plan.prices.monthly, plan.prices.total, plan.prices.currency)
        elif plan.is_priceless:
            table.add_row(sku, plan.name, "-", "-", "", style="dim")
        else:
            table.add_row(sku, plan.name, "…", "…", "", style="yellow")
    return table
