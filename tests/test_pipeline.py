from __future__ import annotations

import io

import pytest

from emgplot.config import PlotConfig, SourceMode
from emgplot.core.cadence import Cadence
from emgplot.core.pipeline import run_pipeline
from emgplot.dataio.timeseries_log import LogFormatError, read_values
from emgplot.render.terminal import CLEAR_SCREEN, Terminal


class FakeReader:
    def __init__(self) -> None:
        self.count = 0

    def read_voltage(self, channel: int) -> float:
        self.count += 1
        return self.count * 0.25


def _cadence(interval: float = 0.1) -> Cadence:
    return Cadence(interval, sleep=lambda _: None)


def test_synthetic_pipeline_draws_one_frame_per_sample() -> None:
    stream = io.StringIO()
    cfg = PlotConfig(mode=SourceMode.SYNTHETIC, scale=3, width=40, height=10, seed=3)

    loop = run_pipeline(cfg, terminal=Terminal(stream), cadence=_cadence(), max_ticks=5)

    assert loop.frames_drawn == 5
    assert len(loop.buffer) == 5
    assert len(loop.buffer.window()) == 3
    assert stream.getvalue().startswith(CLEAR_SCREEN)
    assert stream.getvalue().count("\x1b[1;1H") == 5


def test_playback_pipeline_reproduces_log(tmp_path) -> None:
    path = tmp_path / "log.csv"
    path.write_text("Time;Voltage\n0.000000;1.500000\n0.100000;2.750000\n", encoding="utf-8")
    cfg = PlotConfig(mode=SourceMode.PLAYBACK, file=str(path), width=40, height=10)

    loop = run_pipeline(cfg, terminal=Terminal(io.StringIO()), cadence=_cadence(), max_ticks=6)

    assert loop.buffer.values == [1.5, 2.75]
    assert loop.buffer.timestamps == [0.0, 0.1]
    assert loop.frames_drawn == 2


def test_playback_corrupt_value_terminates_pipeline(tmp_path) -> None:
    path = tmp_path / "log.csv"
    path.write_text("Time;Voltage\n0.0;1.0\n0.1;abc\n", encoding="utf-8")
    cfg = PlotConfig(mode=SourceMode.PLAYBACK, file=str(path), width=40, height=10)

    with pytest.raises(LogFormatError):
        run_pipeline(cfg, terminal=Terminal(io.StringIO()), cadence=_cadence(), max_ticks=5)


def test_missing_playback_file_fails_before_drawing(tmp_path) -> None:
    stream = io.StringIO()
    cfg = PlotConfig(mode=SourceMode.PLAYBACK, file=str(tmp_path / "absent.csv"))

    with pytest.raises(FileNotFoundError):
        run_pipeline(cfg, terminal=Terminal(stream), cadence=_cadence(), max_ticks=1)
    assert stream.getvalue() == ""


def test_live_pipeline_captures_what_it_draws(tmp_path) -> None:
    path = tmp_path / "capture.csv"
    cfg = PlotConfig(file=str(path), width=40, height=10)

    loop = run_pipeline(
        cfg,
        reader=FakeReader(),
        terminal=Terminal(io.StringIO()),
        cadence=_cadence(),
        max_ticks=3,
    )

    assert loop.buffer.values == [0.25, 0.5, 0.75]
    assert path.read_text(encoding="utf-8") == (
        "Time;Voltage\n0.000000;0.250000\n0.100000;0.500000\n0.200000;0.750000"
    )


class InterruptingTerminal(Terminal):
    """Terminal that behaves like a Ctrl-C arriving while a frame is drawn."""

    def __init__(self, frames_before_interrupt: int) -> None:
        super().__init__(io.StringIO())
        self.remaining = frames_before_interrupt

    def move_cursor(self, x: int, y: int) -> None:
        if self.remaining == 0:
            raise KeyboardInterrupt
        self.remaining -= 1
        super().move_cursor(x, y)


def test_interrupted_live_capture_keeps_every_drawn_sample(tmp_path) -> None:
    path = tmp_path / "capture.csv"
    cfg = PlotConfig(file=str(path), width=40, height=10)
    reader = FakeReader()

    with pytest.raises(KeyboardInterrupt):
        run_pipeline(
            cfg,
            reader=reader,
            terminal=InterruptingTerminal(200),
            cadence=_cadence(),
        )

    on_disk = read_values(path)
    drawn = [(i + 1) * 0.25 for i in range(200)]
    assert len(on_disk) >= 200
    assert on_disk[:200].tolist() == drawn
