"""Text shaping helpers shared by segment builders."""

from __future__ import annotations

import math
from datetime import timedelta

ELLIPSIS = "⋯"

_IEC_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB")


def truncate(text: str, max_runes: int) -> str:
    """Shorten ``text`` to at most ``max_runes`` code points.

    Over-long text keeps its first ``max_runes - 1`` code points followed by
    a single ellipsis. A non-positive budget yields an empty string.
    """
    if len(text) <= max_runes:
        return text
    if max_runes <= 0:
        return ""
    return text[: max_runes - 1] + ELLIPSIS


def hms(d: timedelta | float) -> tuple[int, int, int]:
    seconds = d.total_seconds() if isinstance(d, timedelta) else float(d)
    if not math.isfinite(seconds):
        seconds = 0.0
    total = max(int(seconds), 0)
    return total // 3600, (total // 60) % 60, total % 60


def format_elapsed(d: timedelta | float) -> str:
    h, m, s = hms(d)
    if h > 0:
        return f"{h}:{m:02d}:{s:02d}"
    return f"{m}:{s:02d}"


def format_ibytes(size: float) -> str:
    value = float(size)
    if not math.isfinite(value) or value < 0:
        value = 0.0
    unit = _IEC_UNITS[0]
    for unit in _IEC_UNITS:
        if value < 1024 or unit == _IEC_UNITS[-1]:
            break
        value /= 1024
    if unit == "B":
        return f"{int(value)} B"
    if value >= 100:
        return f"{value:.0f} {unit}"
    if value >= 10:
        return f"{value:.1f} {unit}"
    return f"{value:.2f} {unit}"
