from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from .models import Sample, sample_timestamp

WindowRow = Tuple[float, float]


class BufferState(Enum):
    IDLE = "idle"
    STREAMING = "streaming"


class WindowedBuffer:
    """
    Full sample history with a fixed-size trailing view.

    Every appended value is kept for the lifetime of the buffer; only the
    last ``scale`` entries are ever returned by :meth:`window`. Memory grows
    with run length (roughly two floats per sample), a known limit for very
    long sessions.
    """

    __slots__ = ("_interval", "_scale", "_timestamps", "_values")

    def __init__(self, interval: float, scale: int) -> None:
        if scale <= 0:
            raise ValueError("scale must be positive")
        self._interval = float(interval)
        self._scale = int(scale)
        self._timestamps: List[float] = []
        self._values: List[float] = []

    @property
    def state(self) -> BufferState:
        return BufferState.STREAMING if self._values else BufferState.IDLE

    @property
    def scale(self) -> int:
        return self._scale

    def append(self, value: float) -> Sample:
        """Append ``value`` as the next sample and return it."""
        index = len(self._values)
        timestamp = sample_timestamp(index, self._interval)
        self._timestamps.append(timestamp)
        self._values.append(float(value))
        return Sample(index=index, timestamp=timestamp, value=float(value))

    def window(self) -> List[WindowRow]:
        """Return the last ``min(len, scale)`` ``(timestamp, value)`` pairs, oldest first."""
        count = min(len(self._values), self._scale)
        if count == 0:
            return []
        return list(zip(self._timestamps[-count:], self._values[-count:]))

    @property
    def timestamps(self) -> List[float]:
        return list(self._timestamps)

    @property
    def values(self) -> List[float]:
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)
