"""Typed telemetry snapshots, one per metric stream."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum


class BatteryStatus(str, Enum):
    CHARGING = "Charging"
    DISCHARGING = "Discharging"
    FULL = "Full"
    DISCONNECTED = "Disconnected"


class PlaybackStatus(str, Enum):
    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"
    DISCONNECTED = "Disconnected"


@dataclass(frozen=True)
class BatteryInfo:
    name: str
    remaining_pct: int
    status: BatteryStatus


@dataclass(frozen=True)
class LoadInfo:
    loads: tuple[float, float, float]
    uptime: timedelta

    @property
    def load5(self) -> float:
        return self.loads[1]


@dataclass(frozen=True)
class MemoryInfo:
    available_bytes: int
    total_bytes: int

    @property
    def available_gb(self) -> float:
        return self.available_bytes / 1e9


@dataclass(frozen=True)
class TemperatureReading:
    celsius: float


@dataclass(frozen=True)
class NetworkSpeeds:
    rx_bytes_per_sec: float
    tx_bytes_per_sec: float


@dataclass(frozen=True)
class MediaInfo:
    player: str
    artist: str
    title: str
    position: timedelta
    length: timedelta
    playback_status: PlaybackStatus


@dataclass(frozen=True)
class ClockTime:
    local_time: datetime


@dataclass(frozen=True)
class CpuUsage:
    percent: float


@dataclass(frozen=True)
class MetricSnapshot:
    """Everything sampled in one tick; absent sensors are ``None``."""

    batteries: tuple[BatteryInfo, ...]
    load: LoadInfo
    memory: MemoryInfo
    temperature: TemperatureReading | None
    network: NetworkSpeeds
    media: tuple[MediaInfo, ...]
    clock: ClockTime
    cpu: CpuUsage
    timestamp: datetime
