"""Configuration objects and helpers for emgplot.

A run is described by one immutable :class:`PlotConfig`, assembled from
built-in defaults, an optional YAML file and command-line flags, then passed
explicitly to every component that needs it.
"""

from .runtime import (
    PlotConfig,
    SourceMode,
    config_from_mapping,
    load_config,
    select_mode,
    terminal_size,
)

__all__ = [
    "PlotConfig",
    "SourceMode",
    "config_from_mapping",
    "load_config",
    "select_mode",
    "terminal_size",
]
