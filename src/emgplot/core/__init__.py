"""Core streaming pipeline: samples, pacing, handoff, buffering and redraw.

The producer thread (a :mod:`emgplot.sources` source paced by
:class:`Cadence`) passes samples through a :class:`Handoff` to the
:class:`RenderLoop`, which owns the :class:`WindowedBuffer`. The wiring
itself lives in :mod:`emgplot.core.pipeline`.
"""

from .cadence import Cadence
from .handoff import Handoff
from .models import Sample, sample_timestamp
from .window import BufferState, WindowedBuffer

__all__ = [
    "BufferState",
    "Cadence",
    "Handoff",
    "Sample",
    "WindowedBuffer",
    "sample_timestamp",
]
