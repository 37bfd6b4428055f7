"""Wire a sample source to the render loop across a rendezvous handoff."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from ..config import PlotConfig
from ..render.terminal import Terminal
from ..sources import SampleSource, VoltageReader, build_source
from .cadence import Cadence
from .handoff import Handoff
from .render_loop import RenderLoop

logger = logging.getLogger(__name__)


def _produce(
    source: SampleSource,
    handoff: Handoff,
    cadence: Cadence,
    max_ticks: Optional[int],
) -> None:
    try:
        source.run(handoff, cadence, max_ticks=max_ticks)
    except Exception as exc:
        logger.error("%s source failed: %s", source.name, exc)
        handoff.fail(exc)
        return
    handoff.close()


def run_pipeline(
    config: PlotConfig,
    *,
    source: Optional[SampleSource] = None,
    reader: Optional[VoltageReader] = None,
    terminal: Optional[Terminal] = None,
    cadence: Optional[Cadence] = None,
    max_ticks: Optional[int] = None,
) -> RenderLoop:
    """
    Run acquisition and display until the source stops or fails.

    The source is opened on the calling thread, so startup failures (missing
    log, unreachable bus) raise before anything is drawn. Sampling then runs
    on a daemon thread while the render loop blocks the caller. The source is
    closed however the render loop ends, so captured records reach disk on
    Ctrl-C. Without ``max_ticks`` this only returns by exception.
    """
    source = source if source is not None else build_source(config, reader=reader)
    terminal = terminal if terminal is not None else Terminal()
    cadence = cadence if cadence is not None else Cadence(config.interval)
    handoff = Handoff()

    source.open()
    logger.info(
        "Starting %s source: interval=%ss window=%d chart=%dx%d",
        source.name,
        config.interval,
        config.scale,
        config.width,
        config.height,
    )

    try:
        loop = RenderLoop(config, terminal)
        terminal.clear()
        producer = threading.Thread(
            target=_produce,
            args=(source, handoff, cadence, max_ticks),
            name="emgplot-source",
            daemon=True,
        )
        producer.start()
        loop.run(handoff)
        producer.join()
    finally:
        source.close()
    return loop
