"""System telemetry providers for the status bar."""

from .media import PlayerctlProbe, parse_playerctl_line
from .models import (
    BatteryInfo,
    BatteryStatus,
    ClockTime,
    CpuUsage,
    LoadInfo,
    MediaInfo,
    MemoryInfo,
    MetricSnapshot,
    NetworkSpeeds,
    PlaybackStatus,
    TemperatureReading,
)
from .provider import TelemetryProvider, list_power_supplies, read_sysfs_battery

__all__ = [
    "BatteryInfo",
    "BatteryStatus",
    "ClockTime",
    "CpuUsage",
    "LoadInfo",
    "MediaInfo",
    "MemoryInfo",
    "MetricSnapshot",
    "NetworkSpeeds",
    "PlaybackStatus",
    "PlayerctlProbe",
    "TelemetryProvider",
    "TemperatureReading",
    "list_power_supplies",
    "parse_playerctl_line",
    "read_sysfs_battery",
]
