"""Continuous scaling for smooth (non-tiered) indicators."""

from __future__ import annotations

from .models import RawColor

NETWORK_REFERENCE_MAX = 100_000
GREY_STEPS = 200
GREY_FLOOR = 55

LEVEL_GLYPH_BASE = 0x2580
LEVEL_GLYPH_COUNT = 8


def scale(value: float, value_max: float, steps: int) -> int:
    if value_max <= 0:
        return 0
    value = max(0.0, min(float(value), float(value_max)))
    return int(value * steps // value_max)


def grey(n: int) -> RawColor:
    return RawColor.grey(n)


def throughput_color(bytes_per_sec: float, reference_max: float = NETWORK_REFERENCE_MAX) -> RawColor:
    return grey(scale(bytes_per_sec, reference_max, GREY_STEPS) + GREY_FLOOR)


def level_glyph(value: float, maximum: float) -> str:
    level = scale(value, maximum, LEVEL_GLYPH_COUNT)
    if level == 0:
        return ""
    return chr(LEVEL_GLYPH_BASE + level)
