"""Throttled text progress meters for any iterable."""

from .progress import MeterConfig, MisuseError, ProgressMeter
from .status import StatusPrinter
from .tracked import Tracked, detect_total, tracked
from .utils.display import BAR_WIDTH, format_interval, format_meter
from .utils.types import MeterOptions

__all__ = [
    "BAR_WIDTH",
    "MeterConfig",
    "MeterOptions",
    "MisuseError",
    "ProgressMeter",
    "StatusPrinter",
    "Tracked",
    "detect_total",
    "format_interval",
    "format_meter",
    "tracked",
]
