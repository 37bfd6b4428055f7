from __future__ import annotations

import numpy as np

from ..config import PlotConfig
from .base import SampleSource

SYNTHETIC_MAX_VOLTS = 5.0


class SyntheticSource(SampleSource):
    """Uniform random voltages in ``[0, 5)``; ignores file and bus settings."""

    name = "synthetic"

    def __init__(self, config: PlotConfig) -> None:
        super().__init__(config)
        self._rng = np.random.default_rng(config.seed)

    def next_value(self) -> float:
        return float(self._rng.uniform(0.0, SYNTHETIC_MAX_VOLTS))
