from __future__ import annotations

import io

import pytest

from emgplot.config import PlotConfig
from emgplot.core.models import Sample
from emgplot.core.render_loop import RenderLoop
from emgplot.core.window import BufferState
from emgplot.render.terminal import CLEAR_SCREEN, Terminal


class RecordingChart:
    """Chart double that remembers every table it was asked to draw."""

    def __init__(self) -> None:
        self.tables: list[list[tuple[float, float]]] = []

    def __call__(self, table, width, height, *, relative=True) -> str:
        assert relative
        self.tables.append(list(table))
        return f"frame {len(table)} {width}x{height}"


def _sample(i: int, value: float, interval: float = 0.1) -> Sample:
    return Sample(index=i, timestamp=i * interval, value=value)


def _loop(scale: int = 3, chart=None, stream=None):
    cfg = PlotConfig(interval=0.1, scale=scale, width=40, height=10)
    terminal = Terminal(stream if stream is not None else io.StringIO())
    if chart is None:
        return RenderLoop(cfg, terminal)
    return RenderLoop(cfg, terminal, chart=chart)


def test_idle_loop_does_not_render() -> None:
    stream = io.StringIO()
    loop = _loop(stream=stream)
    assert loop.state is BufferState.IDLE
    assert loop.redraw() is None
    assert stream.getvalue() == ""
    assert loop.frames_drawn == 0


def test_scenario_window_after_four_samples() -> None:
    chart = RecordingChart()
    loop = _loop(scale=3, chart=chart)
    for i, value in enumerate([1.0, 2.0, 3.0, 4.0]):
        loop.handle(_sample(i, value))

    assert loop.buffer.timestamps == [0 * 0.1, 1 * 0.1, 2 * 0.1, 3 * 0.1]
    assert chart.tables[-1] == [(1 * 0.1, 2.0), (2 * 0.1, 3.0), (3 * 0.1, 4.0)]
    assert [len(t) for t in chart.tables] == [1, 2, 3, 3]


@pytest.mark.parametrize("scale", [1, 4])
def test_every_frame_ends_with_latest_sample(scale: int) -> None:
    chart = RecordingChart()
    loop = _loop(scale=scale, chart=chart)
    for i in range(10):
        loop.handle(_sample(i, float(i) * 0.5))
        assert len(chart.tables[-1]) == min(i + 1, scale)
        assert chart.tables[-1][-1][1] == float(i) * 0.5


def test_frame_is_written_after_cursor_home() -> None:
    stream = io.StringIO()
    loop = _loop(stream=stream)
    frame = loop.handle(_sample(0, 1.0))

    assert stream.getvalue() == "\x1b[1;1H" + frame + "\n"
    assert CLEAR_SCREEN not in stream.getvalue()


def test_redraw_without_new_samples_is_identical() -> None:
    loop = _loop(scale=5)
    for i in range(7):
        loop.handle(_sample(i, (i % 3) * 1.1))

    assert loop.redraw() == loop.redraw()
    assert len(loop.buffer) == 7


def test_render_errors_propagate() -> None:
    def broken_chart(table, width, height, *, relative=True) -> str:
        raise RuntimeError("terminal gone")

    loop = _loop(chart=broken_chart)
    with pytest.raises(RuntimeError, match="terminal gone"):
        loop.handle(_sample(0, 1.0))
