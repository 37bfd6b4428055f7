"""Common interface implemented by the Live, Playback and Synthetic sources."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..config import PlotConfig
from ..core.cadence import Cadence
from ..core.handoff import Handoff
from ..core.models import Sample, sample_timestamp

logger = logging.getLogger(__name__)


class SampleSource(ABC):
    """
    Producer of one voltage per cadence tick.

    Subclasses implement :meth:`next_value` and, when they hold files or
    hardware handles, :meth:`open` / :meth:`close`. :meth:`record` is the
    persistence hook run for every emitted sample before it is handed off.
    """

    name = "source"

    def __init__(self, config: PlotConfig) -> None:
        self.config = config
        self._index = 0

    def open(self) -> None:
        """Acquire startup resources; failures here are fatal."""

    def close(self) -> None:
        """Release resources acquired by :meth:`open`."""

    @abstractmethod
    def next_value(self) -> Optional[float]:
        """Produce the next voltage, or ``None`` when nothing is available this tick."""

    def record(self, sample: Sample) -> None:
        """Persist ``sample``; sources that do not capture leave this empty."""

    def tick(self) -> Optional[Sample]:
        value = self.next_value()
        if value is None:
            return None
        sample = Sample(
            index=self._index,
            timestamp=sample_timestamp(self._index, self.config.interval),
            value=float(value),
        )
        self._index += 1
        self.record(sample)
        return sample

    def run(
        self,
        handoff: Handoff,
        cadence: Cadence,
        *,
        max_ticks: Optional[int] = None,
    ) -> None:
        """
        Emit samples into ``handoff`` forever.

        With ``max_ticks`` the loop returns after that many cadence ticks,
        counting ticks that produced no sample.
        """
        logger.debug("%s source running every %d ns", self.name, cadence.interval_ns)
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            sample = self.tick()
            if sample is not None:
                handoff.send(sample)
            cadence.wait()
            ticks += 1
