"""Plain-text line chart for the terminal.

The chart is a pure function of its table and size, so redrawing the same
window always yields the same frame.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

MIN_PLOT_ROWS = 1
MIN_PLOT_COLS = 2
POINT = "*"
SEGMENT = "|"


def _y_range(values: np.ndarray, relative: bool) -> Tuple[float, float]:
    lo = float(values.min())
    hi = float(values.max())
    if not relative:
        lo = min(0.0, lo)
    if hi == lo:
        # Flat window: centre the line instead of dividing by zero.
        return lo - 0.5, hi + 0.5
    return lo, hi


def _rows_for(values: np.ndarray, lo: float, hi: float, rows: int) -> np.ndarray:
    scaled = (hi - values) / (hi - lo) * (rows - 1)
    return np.clip(np.rint(scaled), 0, rows - 1).astype(int)


def _fit(text: str, width: int) -> str:
    return text[:width].ljust(width)


def render_line_chart(
    table: Sequence[Tuple[float, float]],
    width: int,
    height: int,
    *,
    relative: bool = True,
    labels: Tuple[str, str] = ("Time", "Voltage"),
) -> str:
    """
    Draw ``table`` (``(x, y)`` rows, x ascending) as a ``width`` x ``height`` frame.

    With ``relative`` the y axis spans the window's own min/max; otherwise it
    starts at zero. Every returned line is exactly ``width`` characters.
    """
    if len(table) == 0:
        raise ValueError("cannot draw an empty table")

    data = np.asarray(table, dtype=np.float64).reshape(-1, 2)
    xs, ys = data[:, 0], data[:, 1]
    lo, hi = _y_range(ys, relative)

    top_label = f"{hi:.3f}"
    mid_label = f"{(hi + lo) / 2:.3f}"
    bottom_label = f"{lo:.3f}"
    label_width = max(len(top_label), len(mid_label), len(bottom_label))

    rows = height - 2
    cols = width - label_width - 1
    if rows < MIN_PLOT_ROWS or cols < MIN_PLOT_COLS:
        raise ValueError(f"chart size {width}x{height} is too small to draw")

    x_min, x_max = float(xs[0]), float(xs[-1])
    if len(xs) > 1 and x_max > x_min:
        col_x = np.linspace(x_min, x_max, cols)
        col_y = np.interp(col_x, xs, ys)
    else:
        col_y = np.full(cols, ys[-1])
    col_rows = _rows_for(col_y, lo, hi, rows)

    grid: List[List[str]] = [[" "] * cols for _ in range(rows)]
    previous = None
    for col, row in enumerate(col_rows):
        if previous is not None and abs(row - previous) > 1:
            step = 1 if row > previous else -1
            for between in range(previous + step, row, step):
                grid[between][col] = SEGMENT
        grid[row][col] = POINT
        previous = row

    y_labels = {0: top_label, rows - 1: bottom_label}
    if rows >= 3:
        y_labels.setdefault((rows - 1) // 2, mid_label)

    lines = []
    for row in range(rows):
        label = y_labels.get(row, "").rjust(label_width)
        lines.append(_fit(label + "|" + "".join(grid[row]), width))
    lines.append(_fit(" " * label_width + "+" + "-" * cols, width))

    left = f"{x_min:.2f}"
    right = f"{x_max:.2f}"
    legend = f"{labels[1]} / {labels[0]}"
    footer = [" "] * width
    start = label_width + 1
    for offset, char in enumerate(left):
        if start + offset < width:
            footer[start + offset] = char
    right_start = width - len(right)
    if right_start > start + len(left):
        footer[right_start:] = list(right)
    legend_start = start + (cols - len(legend)) // 2
    if legend_start > start + len(left) and legend_start + len(legend) < right_start:
        footer[legend_start:legend_start + len(legend)] = list(legend)
    lines.append("".join(footer))

    return "\n".join(lines)
