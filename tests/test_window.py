from __future__ import annotations

import pytest

from emgplot.core.window import BufferState, WindowedBuffer


def test_new_buffer_is_idle_with_empty_window() -> None:
    buf = WindowedBuffer(interval=0.1, scale=3)
    assert buf.state is BufferState.IDLE
    assert buf.window() == []
    assert len(buf) == 0


def test_first_sample_switches_to_streaming() -> None:
    buf = WindowedBuffer(interval=0.1, scale=3)
    sample = buf.append(1.25)
    assert buf.state is BufferState.STREAMING
    assert sample.index == 0
    assert sample.timestamp == 0.0
    assert buf.window() == [(0.0, 1.25)]


def test_trailing_window_after_overflow() -> None:
    buf = WindowedBuffer(interval=0.1, scale=3)
    for value in [1.0, 2.0, 3.0, 4.0]:
        buf.append(value)

    assert buf.timestamps == [0 * 0.1, 1 * 0.1, 2 * 0.1, 3 * 0.1]
    assert buf.timestamps == pytest.approx([0.0, 0.1, 0.2, 0.3])
    assert buf.window() == [(1 * 0.1, 2.0), (2 * 0.1, 3.0), (3 * 0.1, 4.0)]


def test_history_is_retained_beyond_window() -> None:
    buf = WindowedBuffer(interval=0.5, scale=2)
    for value in range(10):
        buf.append(float(value))

    assert len(buf) == 10
    assert buf.values == [float(v) for v in range(10)]
    assert buf.window() == [(8 * 0.5, 8.0), (9 * 0.5, 9.0)]


@pytest.mark.parametrize("scale", [1, 3, 20])
def test_window_length_is_min_of_count_and_scale(scale: int) -> None:
    buf = WindowedBuffer(interval=0.1, scale=scale)
    for n in range(1, 30):
        buf.append(n * 0.5)
        window = buf.window()
        assert len(window) == min(n, scale)
        assert window[-1][1] == n * 0.5


def test_timestamps_are_index_times_interval() -> None:
    buf = WindowedBuffer(interval=0.013, scale=5)
    for i in range(100):
        sample = buf.append(0.0)
        assert sample.timestamp == i * 0.013
    assert buf.timestamps == [i * 0.013 for i in range(100)]


def test_scale_must_be_positive() -> None:
    with pytest.raises(ValueError):
        WindowedBuffer(interval=0.1, scale=0)
