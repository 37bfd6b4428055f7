"""Consumer side of the pipeline: buffer every sample and redraw the chart."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, Tuple

from ..config import PlotConfig
from ..render.chart import render_line_chart
from ..render.terminal import Terminal
from .handoff import Handoff
from .models import Sample
from .window import BufferState, WindowedBuffer

logger = logging.getLogger(__name__)

ChartRenderer = Callable[..., str]


class RenderLoop:
    """
    Owns the :class:`WindowedBuffer` and draws one full frame per sample.

    Frames are written straight to the terminal after moving the cursor to
    the top-left corner; nothing is queued, so a slow redraw holds up the
    producer at the handoff. Rendering and I/O errors propagate.
    """

    def __init__(
        self,
        config: PlotConfig,
        terminal: Terminal,
        *,
        chart: ChartRenderer = render_line_chart,
    ) -> None:
        self.config = config
        self.terminal = terminal
        self.buffer = WindowedBuffer(config.interval, config.scale)
        self._chart = chart
        self.frames_drawn = 0

    @property
    def state(self) -> BufferState:
        return self.buffer.state

    def handle(self, sample: Sample) -> str:
        """Append ``sample`` and redraw."""
        self.buffer.append(sample.value)
        return self._draw(self.buffer.window())

    def redraw(self) -> Optional[str]:
        """Redraw the current window without new data; ``None`` while idle."""
        if self.buffer.state is BufferState.IDLE:
            return None
        return self._draw(self.buffer.window())

    def _draw(self, table: Sequence[Tuple[float, float]]) -> str:
        self.terminal.move_cursor(0, 0)
        frame = self._chart(
            table,
            self.config.width,
            self.config.height,
            relative=True,
        )
        self.terminal.write(frame + "\n")
        self.terminal.flush()
        self.frames_drawn += 1
        return frame

    def run(self, handoff: Handoff) -> None:
        """Consume samples until the producer closes the handoff."""
        for sample in handoff:
            self.handle(sample)
        logger.debug("Sample stream closed after %d frames", self.frames_drawn)
