"""Doctor payload describing which metric sources this host exposes."""

from __future__ import annotations

import platform
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import psutil

from statusbar_renderer.glyphs import GlyphRegistry
from statusbar_telemetry import PlayerctlProbe, list_power_supplies

from .config import BarConfig, config_path
from .logging_setup import log_dir


def _sensor_names() -> list[str]:
    try:
        return sorted((psutil.sensors_temperatures() or {}).keys())
    except Exception:
        return []


def _interfaces() -> list[str]:
    try:
        return sorted(psutil.net_if_addrs().keys())
    except Exception:
        return []


def build_doctor_payload(cfg: BarConfig) -> dict[str, Any]:
    interfaces = _interfaces()
    mdi_count = GlyphRegistry().load_mdi(Path(cfg.fonts.mdi_dir))
    return {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "config_path": str(config_path()),
        "log_dir": str(log_dir()),
        "config": asdict(cfg),
        "batteries": list_power_supplies(),
        "temperature_sensors": _sensor_names(),
        "interfaces": interfaces,
        "interface_found": cfg.network.interface in interfaces,
        "playerctl": PlayerctlProbe().available(),
        "mdi_icons": mdi_count,
    }
