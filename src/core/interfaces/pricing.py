"""Price source contract.

Why Protocol:
- The retry loop only needs something it can ask to `load()`; the HTTP loader
  and test doubles both satisfy it structurally.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PriceSource(Protocol):
    """Anything that can try once to fill in missing plan prices.

    Rules:
    - `load` is asynchronous because it does network I/O.
    - It raises on failure and never retries by itself.
    """

    async def load(self) -> None:
        """Fetch prices for every unresolved plan and record them."""

        ...
