"""ANSI terminal output used for full-frame redraws."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

CLEAR_SCREEN = "\x1b[2J"


class Terminal:
    """Thin wrapper over a text stream that understands ANSI cursor control."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def clear(self) -> None:
        self._stream.write(CLEAR_SCREEN)

    def move_cursor(self, x: int, y: int) -> None:
        """Move to column ``x``, row ``y`` (0-based, top-left is ``(0, 0)``)."""
        self._stream.write(f"\x1b[{y + 1};{x + 1}H")

    def write(self, text: str) -> None:
        self._stream.write(text)

    def flush(self) -> None:
        self._stream.flush()
