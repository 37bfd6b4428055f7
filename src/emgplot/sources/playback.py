from __future__ import annotations

import logging
from typing import Optional

from ..config import PlotConfig
from ..dataio.timeseries_log import TimeSeriesLogReader
from .base import SampleSource

logger = logging.getLogger(__name__)


class PlaybackSource(SampleSource):
    """
    Replay a previously captured log at the configured cadence.

    Timestamps are re-derived from the record index rather than read from the
    file. Once the log is exhausted the source keeps ticking without emitting
    anything; it neither loops nor terminates.
    """

    name = "playback"

    def __init__(self, config: PlotConfig) -> None:
        super().__init__(config)
        self._reader = TimeSeriesLogReader(config.file)

    def open(self) -> None:
        self._reader.open()
        logger.info("Playing back %s", self._reader.path)

    def close(self) -> None:
        self._reader.close()

    def next_value(self) -> Optional[float]:
        return self._reader.read_value()
