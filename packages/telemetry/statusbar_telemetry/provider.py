"""Linux telemetry provider built on psutil, sysfs and playerctl."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Sequence

import psutil

from .media import PlayerctlProbe
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
    TemperatureReading,
)

POWER_SUPPLY_ROOT = Path("/sys/class/power_supply")

_SYSFS_STATUS = {
    "Charging": BatteryStatus.CHARGING,
    "Full": BatteryStatus.FULL,
}


def _read(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError:
        return None


def _read_int(path: Path) -> int | None:
    raw = _read(path)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def read_sysfs_battery(name: str, root: Path = POWER_SUPPLY_ROOT) -> BatteryInfo | None:
    """Read one battery from sysfs; ``None`` when the kernel does not expose it."""
    base = root / name
    if not base.is_dir():
        return None
    if _read_int(base / "present") == 0:
        return BatteryInfo(name=name, remaining_pct=0, status=BatteryStatus.DISCONNECTED)

    pct = None
    for now_file, full_file in (("energy_now", "energy_full"), ("charge_now", "charge_full")):
        now = _read_int(base / now_file)
        full = _read_int(base / full_file)
        if now is not None and full:
            pct = int(now * 100 / full)
            break
    if pct is None:
        pct = _read_int(base / "capacity") or 0

    status = _SYSFS_STATUS.get(_read(base / "status") or "", BatteryStatus.DISCHARGING)
    return BatteryInfo(name=name, remaining_pct=max(0, min(100, pct)), status=status)


def _psutil_battery(name: str) -> BatteryInfo:
    try:
        batt = psutil.sensors_battery()
    except Exception:
        batt = None
    if batt is None:
        return BatteryInfo(name=name, remaining_pct=0, status=BatteryStatus.DISCONNECTED)
    if batt.power_plugged:
        status = BatteryStatus.FULL if batt.percent >= 100 else BatteryStatus.CHARGING
    else:
        status = BatteryStatus.DISCHARGING
    return BatteryInfo(name=name, remaining_pct=int(batt.percent), status=status)


def _cpu_temp_c() -> float | None:
    try:
        temps = psutil.sensors_temperatures()
    except Exception:
        return None
    if not temps:
        return None

    for name in ("coretemp", "cpu_thermal", "k10temp", "acpitz"):
        entries = temps.get(name)
        if entries:
            val = entries[0].current
            return float(val) if val is not None else None

    for _name, entries in temps.items():
        if entries and entries[0].current is not None:
            return float(entries[0].current)
    return None


def _uptime() -> timedelta:
    try:
        return timedelta(seconds=max(time.time() - psutil.boot_time(), 0.0))
    except Exception:
        return timedelta(0)


def _loads() -> tuple[float, float, float]:
    try:
        one, five, fifteen = psutil.getloadavg()
    except (AttributeError, OSError):
        return (0.0, 0.0, 0.0)
    return (float(one), float(five), float(fifteen))


@dataclass
class _CounterSnapshot:
    ts: float
    net_sent: int
    net_recv: int


class TelemetryProvider:
    """Single polling provider; each poll yields one immutable snapshot."""

    def __init__(
        self,
        interface: str = "wlan0",
        batteries: Sequence[str] = ("BAT0", "BAT1"),
        players: Sequence[str] = ("spotify", "rhythmbox"),
        power_supply_root: Path = POWER_SUPPLY_ROOT,
        media_probe: PlayerctlProbe | None = None,
    ) -> None:
        self.interface = interface
        self.batteries = tuple(batteries)
        self.players = tuple(players)
        self.power_supply_root = power_supply_root
        self._media = media_probe or PlayerctlProbe()
        sent, recv = self._net_counters()
        self._prev = _CounterSnapshot(ts=time.monotonic(), net_sent=sent, net_recv=recv)
        # Prime non-blocking CPU measurement.
        psutil.cpu_percent(interval=None)

    def _net_counters(self) -> tuple[int, int]:
        try:
            per_nic = psutil.net_io_counters(pernic=True)
        except Exception:
            return (0, 0)
        nic = per_nic.get(self.interface)
        if nic is None:
            return (0, 0)
        return (nic.bytes_sent, nic.bytes_recv)

    def poll_batteries(self) -> tuple[BatteryInfo, ...]:
        out = []
        for idx, name in enumerate(self.batteries):
            info = read_sysfs_battery(name, self.power_supply_root)
            if info is None:
                if idx == 0 and not self.power_supply_root.is_dir():
                    info = _psutil_battery(name)
                else:
                    info = BatteryInfo(name=name, remaining_pct=0, status=BatteryStatus.DISCONNECTED)
            out.append(info)
        return tuple(out)

    def poll_network(self) -> NetworkSpeeds:
        now = time.monotonic()
        elapsed = max(now - self._prev.ts, 1e-6)
        sent, recv = self._net_counters()
        speeds = NetworkSpeeds(
            rx_bytes_per_sec=max(recv - self._prev.net_recv, 0) / elapsed,
            tx_bytes_per_sec=max(sent - self._prev.net_sent, 0) / elapsed,
        )
        self._prev = _CounterSnapshot(ts=now, net_sent=sent, net_recv=recv)
        return speeds

    def poll_media(self) -> tuple[MediaInfo, ...]:
        return tuple(self._media.poll(player) for player in self.players)

    def poll(self) -> MetricSnapshot:
        now_utc = datetime.now(timezone.utc)

        vm = psutil.virtual_memory()
        temp = _cpu_temp_c()

        return MetricSnapshot(
            batteries=self.poll_batteries(),
            load=LoadInfo(loads=_loads(), uptime=_uptime()),
            memory=MemoryInfo(available_bytes=int(vm.available), total_bytes=int(vm.total)),
            temperature=(TemperatureReading(celsius=temp) if temp is not None else None),
            network=self.poll_network(),
            media=self.poll_media(),
            clock=ClockTime(local_time=now_utc.astimezone()),
            cpu=CpuUsage(percent=float(psutil.cpu_percent(interval=None))),
            timestamp=now_utc,
        )


def list_power_supplies(root: Path = POWER_SUPPLY_ROOT) -> list[str]:
    if not root.is_dir():
        return []
    return sorted(p.name for p in root.iterdir() if p.name.startswith("BAT"))
