"""Interchangeable sample sources.

Exactly one source runs per process, chosen from the configured
:class:`~emgplot.config.SourceMode`:

- :class:`LiveSource` reads the ADS1115 and captures to the log file,
- :class:`PlaybackSource` replays a captured log,
- :class:`SyntheticSource` generates random voltages.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from ..config import PlotConfig, SourceMode
from .base import SampleSource
from .live import Ads1115Reader, LiveSource, VoltageReader
from .playback import PlaybackSource
from .synthetic import SyntheticSource

_FACTORIES: Dict[SourceMode, Callable[[PlotConfig, Optional[VoltageReader]], SampleSource]] = {
    SourceMode.LIVE: lambda config, reader: LiveSource(config, reader=reader),
    SourceMode.PLAYBACK: lambda config, reader: PlaybackSource(config),
    SourceMode.SYNTHETIC: lambda config, reader: SyntheticSource(config),
}


def build_source(config: PlotConfig, *, reader: Optional[VoltageReader] = None) -> SampleSource:
    """Create the source selected by ``config.mode``; ``reader`` only applies to Live."""
    return _FACTORIES[config.mode](config, reader)


__all__ = [
    "Ads1115Reader",
    "LiveSource",
    "PlaybackSource",
    "SampleSource",
    "SyntheticSource",
    "VoltageReader",
    "build_source",
]
