"""
Live capture from an ADS1115 analog-to-digital converter over I2C.

The converter is driven through the Adafruit CircuitPython stack
(``adafruit-circuitpython-ads1x15`` on top of ``adafruit-blinka``), which is
only importable on boards with an I2C bus; it is installed with the
``hardware`` extra and imported when the reader is created.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol

from ..config import PlotConfig
from ..core.models import Sample
from ..dataio.timeseries_log import TimeSeriesLogWriter
from .base import SampleSource

logger = logging.getLogger(__name__)

FIXED_GAIN = 1  # ±4.096 V
ADS1115_CHANNELS = range(1, 5)


class VoltageReader(Protocol):
    """Anything that can sample the voltage on a numbered analog channel."""

    def read_voltage(self, channel: int) -> float:  # pragma: no cover - protocol
        ...


def _resolve_pins(ads_module: Any) -> Dict[int, Any]:
    """Map 1-based channel numbers to the driver's pin constants."""
    pins: Dict[int, Any] = {}
    for channel in range(1, 5):
        name = f"P{channel - 1}"
        pins[channel] = getattr(ads_module, name, channel - 1)
    return pins


class Ads1115Reader:
    """Single-shot voltage reads from an ADS1115 at ``address``."""

    def __init__(self, address: int) -> None:
        import board
        import busio
        import adafruit_ads1x15.ads1115 as ads_module
        from adafruit_ads1x15.analog_in import AnalogIn

        self.address = address
        i2c = busio.I2C(board.SCL, board.SDA)
        self._ads = ads_module.ADS1115(i2c, gain=FIXED_GAIN, address=address)
        self._analog_in = AnalogIn
        self._pins = _resolve_pins(ads_module)
        self._channels: Dict[int, Any] = {}
        logger.info("Connected to ADS1115 at 0x%02x", address)

    def read_voltage(self, channel: int) -> float:
        chan = self._channels.get(channel)
        if chan is None:
            if channel not in self._pins:
                raise ValueError(f"ADS1115 has channels 1-4, got {channel}")
            chan = self._analog_in(self._ads, self._pins[channel])
            self._channels[channel] = chan
        return float(chan.voltage)


class LiveSource(SampleSource):
    """Read the configured bus channel each tick and capture every sample to the log."""

    name = "live"

    def __init__(self, config: PlotConfig, reader: Optional[VoltageReader] = None) -> None:
        super().__init__(config)
        self._reader = reader
        self._writer = TimeSeriesLogWriter(config.file)

    def open(self) -> None:
        if self._reader is None:
            if self.config.channel not in ADS1115_CHANNELS:
                raise ValueError(
                    f"ADS1115 has channels 1-4, got {self.config.channel}"
                )
            self._reader = Ads1115Reader(self.config.address)
        self._writer.open()

    def close(self) -> None:
        self._writer.close()

    def next_value(self) -> float:
        if self._reader is None:
            raise RuntimeError("LiveSource.open() must be called first")
        return self._reader.read_voltage(self.config.channel)

    def record(self, sample: Sample) -> None:
        self._writer.append(sample)
