"""Command-line entry point.

Examples::

    emgplot --file data.csv --address 0x68 --channel 1
    emgplot --file data.csv --playback
    emgplot --debug --interval 0.05 --scale 40
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from .config import PlotConfig, config_from_mapping, load_config, terminal_size
from .core.pipeline import run_pipeline

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Flags that map one-to-one onto PlotConfig fields / YAML keys.
_CONFIG_FLAGS = (
    "file",
    "address",
    "channel",
    "playback",
    "interval",
    "debug",
    "scale",
    "width",
    "height",
    "seed",
)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emgplot",
        description="Display muscle activity measured through an ADC as a live terminal chart",
    )
    parser.add_argument(
        "--file",
        type=str,
        help="File where samples are captured; in playback mode, the file to replay",
    )
    parser.add_argument(
        "--address",
        type=lambda text: int(text, 0),
        help=(
            "I2C address of the ADC (default: 0x68). An ADS1115 answers on "
            "0x48-0x4B, so set this explicitly for one"
        ),
    )
    parser.add_argument(
        "--channel",
        type=int,
        help="Analog channel (1-4) the muscle sensor is connected to (default: 1)",
    )
    parser.add_argument(
        "--playback",
        action="store_true",
        default=None,
        help="Replay --file instead of reading the sensor",
    )
    parser.add_argument(
        "--interval",
        type=float,
        help="Seconds between two measurements (default: 0.1)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Plot random data instead of reading the sensor",
    )
    parser.add_argument(
        "--scale",
        type=int,
        help="How many samples are plotted at the same time (default: 20)",
    )
    parser.add_argument("--width", type=int, help="Chart width (default: terminal width)")
    parser.add_argument("--height", type=int, help="Chart height (default: terminal height)")
    parser.add_argument("--seed", type=int, help="Seed for the random data of --debug")
    parser.add_argument(
        "--config",
        type=Path,
        help="Optional YAML file with defaults for the options above",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write diagnostics to this file instead of stderr",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Diagnostic verbosity (default: WARNING)",
    )
    return parser


def configure_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    handlers: list[logging.Handler]
    if log_file is not None:
        handlers = [logging.FileHandler(log_file, encoding="utf-8")]
    else:
        handlers = [logging.StreamHandler(sys.stderr)]
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def resolve_config(args: argparse.Namespace) -> PlotConfig:
    """Merge YAML defaults, flags and the terminal size into one :class:`PlotConfig`."""
    raw: Dict[str, Any] = load_config(args.config)
    for name in _CONFIG_FLAGS:
        value = getattr(args, name)
        if value is not None:
            raw[name] = value
    columns, lines = terminal_size()
    return config_from_mapping(raw, width=columns, height=lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    try:
        config = resolve_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    logger.debug("Resolved configuration: %s", config)
    try:
        run_pipeline(config)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
