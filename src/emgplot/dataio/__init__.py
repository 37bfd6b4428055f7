"""Time-series log input/output.

- :mod:`timeseries_log` writes capture files and reads them back for playback.
"""

from .timeseries_log import (
    LogFormatError,
    TimeSeriesLogReader,
    TimeSeriesLogWriter,
    parse_record,
    read_values,
)

__all__ = [
    "LogFormatError",
    "TimeSeriesLogReader",
    "TimeSeriesLogWriter",
    "parse_record",
    "read_values",
]
