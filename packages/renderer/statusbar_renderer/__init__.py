"""Metric-to-segment transformation layer and bar output encoders."""

from .glyphs import GlyphRegistry, ResolvedGlyph
from .i3bar import I3barEncoder, I3barStream
from .models import ClickAction, Color, DisplayDescriptor, Glyph, NamedColor, RawColor
from .scale import grey, level_glyph, scale, throughput_color
from .segments import (
    build_battery_segment,
    build_clock_segment,
    build_cpu_segment,
    build_load_segment,
    build_media_segment,
    build_memory_segment,
    build_network_segment,
    build_temperature_segment,
)
from .text import format_elapsed, format_ibytes, truncate
from .themes import DEFAULT_SCHEME_NAME, ColorScheme, get_scheme, list_schemes, scheme_from_map
from .tiers import Comparison, ThresholdTiers, Tier, TierRule, classify, classify_load

__all__ = [
    "ClickAction",
    "Color",
    "ColorScheme",
    "Comparison",
    "DEFAULT_SCHEME_NAME",
    "DisplayDescriptor",
    "Glyph",
    "GlyphRegistry",
    "I3barEncoder",
    "I3barStream",
    "NamedColor",
    "RawColor",
    "ResolvedGlyph",
    "ThresholdTiers",
    "Tier",
    "TierRule",
    "build_battery_segment",
    "build_clock_segment",
    "build_cpu_segment",
    "build_load_segment",
    "build_media_segment",
    "build_memory_segment",
    "build_network_segment",
    "build_temperature_segment",
    "classify",
    "classify_load",
    "format_elapsed",
    "format_ibytes",
    "get_scheme",
    "grey",
    "level_glyph",
    "list_schemes",
    "scale",
    "scheme_from_map",
    "throughput_color",
    "truncate",
]
