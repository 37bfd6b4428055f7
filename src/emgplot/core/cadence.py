"""Fixed-period pacing for sample sources."""

from __future__ import annotations

import time
from typing import Callable

NS_PER_SECOND = 1_000_000_000


class Cadence:
    """
    Sleep a fixed ``interval`` between ticks.

    The delay is not corrected for the time spent producing or handing off a
    sample, so wall-clock drift accumulates; recorded timestamps do not drift
    because they are derived from the sample index.
    """

    def __init__(
        self,
        interval: float,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if not interval > 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._interval_ns = int(interval * NS_PER_SECOND)
        self._sleep = sleep

    @property
    def interval_ns(self) -> int:
        """Period in whole nanoseconds (truncated)."""
        return self._interval_ns

    def wait(self) -> None:
        self._sleep(self._interval_ns / NS_PER_SECOND)
