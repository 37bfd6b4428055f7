"""Runtime configuration for the acquisition/plotting pipeline."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

DEFAULT_ADDRESS = 0x68
DEFAULT_CHANNEL = 1
DEFAULT_INTERVAL = 0.1
DEFAULT_SCALE = 20
CONFIG_SECTION = "emgplot"


class SourceMode(str, Enum):
    """Which sample source feeds the plot."""

    LIVE = "live"
    PLAYBACK = "playback"
    SYNTHETIC = "synthetic"


def select_mode(*, debug: bool = False, playback: bool = False) -> SourceMode:
    """Resolve the source flags with precedence Synthetic > Playback > Live."""
    if debug:
        return SourceMode.SYNTHETIC
    if playback:
        return SourceMode.PLAYBACK
    return SourceMode.LIVE


def terminal_size() -> tuple[int, int]:
    """Return ``(columns, lines)`` of the controlling terminal."""
    size = shutil.get_terminal_size()
    return size.columns, size.lines


@dataclass(frozen=True, slots=True)
class PlotConfig:
    """
    Settings shared read-only by every component of a run.

    ``file`` is the capture target in Live mode and the log to replay in
    Playback mode. ``address`` and ``channel`` only matter for Live capture,
    ``seed`` only for the synthetic generator.
    """

    file: str = ""
    address: int = DEFAULT_ADDRESS
    channel: int = DEFAULT_CHANNEL
    interval: float = DEFAULT_INTERVAL
    mode: SourceMode = SourceMode.LIVE
    scale: int = DEFAULT_SCALE
    width: int = 80
    height: int = 24
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.interval > 0:
            raise ValueError(f"interval must be positive, got {self.interval}")
        if self.scale <= 0:
            raise ValueError(f"scale must be a positive integer, got {self.scale}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"chart size must be positive, got {self.width}x{self.height}"
            )


def _flatten_section(data: Mapping[str, Any]) -> dict[str, Any]:
    """Lift the keys of an ``emgplot:`` section to the top level; the section wins."""
    section = data.get(CONFIG_SECTION)
    flat = {key: value for key, value in data.items() if key != CONFIG_SECTION}
    if isinstance(section, Mapping):
        flat.update(section)
    return flat


def _coerce_mode(normalized: Mapping[str, Any]) -> SourceMode:
    if bool(normalized.get("debug")) or bool(normalized.get("playback")):
        return select_mode(
            debug=bool(normalized.get("debug")),
            playback=bool(normalized.get("playback")),
        )
    raw = normalized.get("mode")
    if raw is None:
        return SourceMode.LIVE
    try:
        return SourceMode(str(raw).strip().lower())
    except ValueError as exc:
        raise ValueError(f"Unknown source mode {raw!r}") from exc


def config_from_mapping(
    data: Mapping[str, Any] | None,
    *,
    width: int | None = None,
    height: int | None = None,
) -> PlotConfig:
    """
    Build :class:`PlotConfig` from ``data`` (ignoring unknown keys).

    ``debug`` and ``playback`` booleans are resolved with :func:`select_mode`;
    an explicit ``mode`` string is honoured when neither is set. ``width`` and
    ``height`` act as fallbacks for chart dimensions missing from ``data``.
    """
    normalized = _flatten_section(data or {})
    payload: dict[str, Any] = {
        f.name: normalized[f.name]
        for f in fields(PlotConfig)
        if f.name != "mode" and f.name in normalized
    }
    payload["mode"] = _coerce_mode(normalized)

    if "address" in payload and isinstance(payload["address"], str):
        payload["address"] = int(payload["address"], 0)
    if width is not None:
        payload.setdefault("width", width)
    if height is not None:
        payload.setdefault("height", height)

    for key in ("address", "channel", "scale", "width", "height"):
        if key in payload:
            payload[key] = int(payload[key])
    if "interval" in payload:
        payload["interval"] = float(payload["interval"])
    if "file" in payload:
        payload["file"] = str(payload["file"] or "")
    return PlotConfig(**payload)


def load_config(path: str | Path | None) -> dict[str, Any]:
    """
    Load raw configuration values from the YAML file at ``path``.

    Missing files fall back to an empty mapping.
    """
    if path is None:
        return {}
    cfg_path = Path(path)
    if not cfg_path.exists():
        return {}
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return _flatten_section(raw)


__all__ = [
    "PlotConfig",
    "SourceMode",
    "config_from_mapping",
    "load_config",
    "select_mode",
    "terminal_size",
]
