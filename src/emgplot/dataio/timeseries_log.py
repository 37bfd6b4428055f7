"""Reading and writing the ``;``-delimited time-series log.

Layout::

    Time;Voltage
    0.000000;1.500000
    0.100000;2.750000

The header carries no trailing newline; every record is written as
``"\\n<time>;<voltage>"`` in ``%f`` notation, so a capture file ends without a
newline. Playback ignores the time column and re-derives it from the record
index.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import IO, List, Optional

import numpy as np

from ..core.models import Sample

logger = logging.getLogger(__name__)

DELIMITER = ";"
HEADER = ("Time", "Voltage")


class LogFormatError(ValueError):
    """A record in a time-series log could not be parsed."""


def format_record(sample: Sample) -> str:
    return f"\n{sample.timestamp:f}{DELIMITER}{sample.value:f}"


def parse_record(line: str) -> Optional[float]:
    """
    Return the voltage stored in one log line.

    Blank lines (and the empty string returned at end of file) yield ``None``.
    A line without the delimiter or with a non-numeric or non-finite voltage
    raises :class:`LogFormatError`.
    """
    text = line.strip()
    if not text:
        return None
    parts = text.split(DELIMITER)
    if len(parts) < 2:
        raise LogFormatError(f"Expected '<time>{DELIMITER}<voltage>', got {text!r}")
    try:
        value = float(parts[1])
    except ValueError as exc:
        raise LogFormatError(f"Bad voltage field in log line {text!r}") from exc
    if not math.isfinite(value):
        raise LogFormatError(f"Non-finite voltage in log line {text!r}")
    return value


class TimeSeriesLogWriter:
    """
    Append-only writer owning one capture file for its whole lifetime.

    Every record is flushed as it is written, so an interrupted capture loses
    at most the record in flight.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._fh: Optional[IO[str]] = None

    def open(self) -> None:
        """Create (or truncate) the file and write the header."""
        self._fh = self.path.open("w", encoding="utf-8", newline="")
        self._fh.write(DELIMITER.join(HEADER))
        self._fh.flush()
        logger.info("Capturing samples to %s", self.path)

    def append(self, sample: Sample) -> None:
        if self._fh is None:
            raise RuntimeError("TimeSeriesLogWriter.open() must be called first")
        self._fh.write(format_record(sample))
        self._fh.flush()

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def __enter__(self) -> TimeSeriesLogWriter:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class TimeSeriesLogReader:
    """Sequential reader used by playback, one record per call."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._fh: Optional[IO[str]] = None
        self._at_eof = False

    def open(self) -> None:
        """Open the log and skip its header line."""
        self._fh = self.path.open("r", encoding="utf-8")
        header = self._fh.readline()
        if header.strip() != DELIMITER.join(HEADER):
            logger.warning("Unexpected header in %s: %r", self.path, header.strip())

    @property
    def at_eof(self) -> bool:
        return self._at_eof

    def read_value(self) -> Optional[float]:
        """Parse the next line; ``None`` for a blank line or end of file."""
        if self._fh is None:
            raise RuntimeError("TimeSeriesLogReader.open() must be called first")
        line = self._fh.readline()
        if line == "":
            if not self._at_eof:
                logger.info("Reached end of %s", self.path)
            self._at_eof = True
            return None
        self._at_eof = False
        return parse_record(line)

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None


def read_values(path: Path) -> np.ndarray:
    """Load every voltage in a log at once (header skipped, blank lines ignored)."""
    with path.open("r", encoding="utf-8") as f:
        f.readline()
        values: List[float] = []
        for line in f:
            value = parse_record(line)
            if value is not None:
                values.append(value)
    return np.asarray(values, dtype=np.float64)
