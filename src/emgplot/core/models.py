"""Shared dataclasses for acquired samples."""

from dataclasses import dataclass


def sample_timestamp(index: int, interval: float) -> float:
    """Timestamp of the ``index``-th sample; derived, never measured."""
    return index * interval


@dataclass(frozen=True)
class Sample:
    index: int
    # Seconds since the first sample, always index * interval.
    timestamp: float
    # Volts.
    value: float
