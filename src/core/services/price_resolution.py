"""Background price resolution.

The loop runs one lookup at a time, gives each attempt a fixed time budget,
rests for a fixed cooldown whatever happened, and starts over until no plan
is left unresolved. There is no attempt limit: it is meant to be started once
when the process boots and left alone.

An attempt that exceeds its budget is abandoned rather than cancelled. The
underlying request keeps going and, if it eventually succeeds, its prices
still land in the registry.
"""

from __future__ import annotations

import asyncio
from typing import Callable

from core.domain.plans import PlanRegistry
from core.errors import report_error as default_report_error
from core.interfaces.pricing import PriceSource
from core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0
DEFAULT_COOLDOWN_SECONDS = 1.0


class RetryScheduler:
    """Drives a `PriceSource` until every non-priceless plan is priced."""

    def __init__(
        self,
        registry: PlanRegistry,
        source: PriceSource,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        cooldown_seconds: float = DEFAULT_COOLDOWN_SECONDS,
        report_error: Callable[[BaseException], None] | None = None,
    ) -> None:
        self._registry = registry
        self._source = source
        self._timeout = timeout_seconds
        self._cooldown = cooldown_seconds
        self._report_error = report_error or default_report_error
        self._abandoned: set[asyncio.Task[None]] = set()
        self.attempts = 0

    @property
    def abandoned(self) -> int:
        """Attempts that timed out and are still running."""

        return len(self._abandoned)

    def start(self) -> asyncio.Task[int]:
        """Schedule `run()` on the running event loop and return its task."""

        return asyncio.get_running_loop().create_task(self.run())

    async def run(self) -> int:
        """Loop until fully priced; returns the number of attempts made."""

        while True:
            await self._attempt()
            await asyncio.sleep(self._cooldown)
            if not self._registry.has_unresolved():
                break

        logger.info("prices_resolved", attempts=self.attempts)
        return self.attempts

    async def _attempt(self) -> None:
        self.attempts += 1
        task = asyncio.ensure_future(self._load_reporting_errors())
        done, _ = await asyncio.wait({task}, timeout=self._timeout)
        if not done:
            logger.debug(
                "price_lookup_abandoned",
                attempt=self.attempts,
                timeout_seconds=self._timeout,
            )
            self._abandoned.add(task)
            task.add_done_callback(self._abandoned.discard)

    async def _load_reporting_errors(self) -> None:
        try:
            await self._source.load()
        except Exception as exc:
            self._report_error(exc)
