"""Core services for settings, logging, click dispatch, and the bar loop."""

from .bar import BarRunner, SegmentOptions, build_segments
from .clicks import ClickDispatcher, parse_click_line
from .config import COLOR_OVERRIDES, BarConfig, load_config, save_config
from .diagnostics import build_doctor_payload

__all__ = [
    "COLOR_OVERRIDES",
    "BarConfig",
    "BarRunner",
    "ClickDispatcher",
    "SegmentOptions",
    "build_doctor_payload",
    "build_segments",
    "load_config",
    "parse_click_line",
    "save_config",
]
