"""Segment builders: one pure function per metric stream."""

from __future__ import annotations

import math
from datetime import timedelta

from statusbar_telemetry.models import (
    BatteryInfo,
    BatteryStatus,
    ClockTime,
    CpuUsage,
    LoadInfo,
    MediaInfo,
    MemoryInfo,
    NetworkSpeeds,
    PlaybackStatus,
    TemperatureReading,
)

from .models import DIM_ICON, ClickAction, DisplayDescriptor, Glyph, RawColor
from .scale import NETWORK_REFERENCE_MAX, level_glyph, throughput_color
from .text import format_elapsed, format_ibytes, truncate
from .tiers import (
    BATTERY_TIERS,
    LOAD_TIERS,
    LOAD_WARMUP,
    MEMORY_TIERS,
    TEMPERATURE_TIERS,
    ThresholdTiers,
    classify_load,
)

TASK_MANAGER = ClickAction(command=("gnome-system-monitor",))
CALENDAR = ClickAction(command=("gsimplecal",))

MEDIA_BUDGET = 40
MEDIA_FIELD_BUDGET = 20
MEDIA_ICON_COLOR = RawColor.hex("#f70")


def battery_icon(pct: int, charging: bool) -> str:
    name = "mdi-battery"
    if charging:
        name += "-charging"
    tenth = pct // 10
    if tenth == 0:
        name += "-outline"
    elif tenth < 10:
        name += f"-{tenth}0"
    return name


def build_battery_segment(
    info: BatteryInfo,
    text: str | None = None,
    tiers: ThresholdTiers = BATTERY_TIERS,
) -> DisplayDescriptor | None:
    if info.status is BatteryStatus.DISCONNECTED:
        return None
    pct = max(0, min(100, int(info.remaining_pct)))
    return DisplayDescriptor(
        icon=Glyph(battery_icon(pct, info.status is BatteryStatus.CHARGING)),
        primary_text=text if text is not None else f"{pct}%",
        severity=tiers.classify(pct),
    )


def build_load_segment(
    info: LoadInfo,
    click: ClickAction = TASK_MANAGER,
    tiers: ThresholdTiers = LOAD_TIERS,
    warmup: timedelta = LOAD_WARMUP,
) -> DisplayDescriptor:
    load5 = info.load5
    return DisplayDescriptor(
        icon=Glyph("mdi-heart-pulse", DIM_ICON),
        primary_text=f"{load5:0.2f}",
        severity=classify_load(load5, info.uptime, tiers=tiers, warmup=warmup),
        click_action=click,
    )


def build_memory_segment(
    info: MemoryInfo,
    click: ClickAction = TASK_MANAGER,
    tiers: ThresholdTiers = MEMORY_TIERS,
) -> DisplayDescriptor:
    return DisplayDescriptor(
        icon=Glyph("mdi-memory", DIM_ICON),
        primary_text=format_ibytes(info.available_bytes),
        severity=tiers.classify(info.available_gb),
        click_action=click,
    )


TEMPERATURE_PLACEHOLDER = "--℃"


def _celsius_text(celsius: float) -> str:
    if math.isnan(celsius):
        return TEMPERATURE_PLACEHOLDER
    return f"{int(max(-999.0, min(999.0, celsius))):2d}℃"

def build_temperature_segment(
    reading: TemperatureReading,
    tiers: ThresholdTiers = TEMPERATURE_TIERS,
) -> DisplayDescriptor:
    return DisplayDescriptor(
        icon=Glyph("mdi-fan", DIM_ICON),
        primary_text=_celsius_text(reading.celsius),
        severity=tiers.classify(reading.celsius),
    )


def build_network_segment(
    speeds: NetworkSpeeds,
    reference_max: float = NETWORK_REFERENCE_MAX,
) -> DisplayDescriptor:
    return DisplayDescriptor(
        icon=Glyph("mdi-upload-network", throughput_color(speeds.tx_bytes_per_sec, reference_max)),
        primary_text="",
        extra_icons=(Glyph("mdi-download-network", throughput_color(speeds.rx_bytes_per_sec, reference_max)),),
    )


def fit_artist_title(artist: str, title: str) -> tuple[str, str]:
    """Fit both fields into the media budget, giving each half up front.

    The artist is re-truncated against the title's real length when the
    title came out short; the title never gets a second pass.
    """
    short_artist = truncate(artist, MEDIA_FIELD_BUDGET)
    short_title = truncate(title, MEDIA_BUDGET - len(short_artist))
    if len(short_title) < MEDIA_FIELD_BUDGET:
        short_artist = truncate(artist, MEDIA_BUDGET - len(short_title))
    return short_artist, short_title


def build_media_segment(info: MediaInfo) -> DisplayDescriptor | None:
    if info.playback_status in (PlaybackStatus.STOPPED, PlaybackStatus.DISCONNECTED):
        return None
    artist, title = fit_artist_title(info.artist, info.title)
    position = None
    if info.playback_status is PlaybackStatus.PLAYING:
        position = f"{format_elapsed(info.position)}/{format_elapsed(info.length)}"
    return DisplayDescriptor(
        icon=Glyph("fa-music", MEDIA_ICON_COLOR),
        primary_text=f"{title} - {artist}",
        secondary_text=position,
    )


def build_clock_segment(clock: ClockTime, click: ClickAction = CALENDAR) -> DisplayDescriptor:
    now = clock.local_time
    return DisplayDescriptor(
        icon=Glyph("mdi-clock", DIM_ICON),
        primary_text=f"{now:%a %b} {now.day} {now:%H:%M:%S}",
        click_action=click,
    )


def build_cpu_segment(usage: CpuUsage) -> DisplayDescriptor:
    pct = float(usage.percent)
    pct = 0.0 if math.isnan(pct) else max(0.0, min(100.0, pct))
    return DisplayDescriptor(
        icon=Glyph("mdi-chip", DIM_ICON),
        primary_text=f"{level_glyph(pct, 100)}{int(pct)}%",
    )
