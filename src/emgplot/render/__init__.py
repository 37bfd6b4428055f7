"""Terminal drawing: the line-chart primitive and ANSI cursor control."""

from .chart import render_line_chart
from .terminal import Terminal

__all__ = ["Terminal", "render_line_chart"]
