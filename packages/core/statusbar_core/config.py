"""Persistent bar settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 2

SEGMENT_NAMES = ("media", "load", "cpu", "temperature", "memory", "network", "battery", "clock")
COLOR_OVERRIDES = ("good", "degraded", "bad", "dim_icon")


@dataclass
class ColorsConfig:
    scheme: str = "Default"
    # Unset overrides fall through to the named scheme.
    good: str | None = None
    degraded: str | None = None
    bad: str | None = None
    dim_icon: str | None = None


@dataclass
class ClicksConfig:
    task_manager: list[str] = field(default_factory=lambda: ["gnome-system-monitor"])
    calendar: list[str] = field(default_factory=lambda: ["gsimplecal"])


@dataclass
class NetworkConfig:
    interface: str = "wlan0"
    reference_bytes_per_sec: float = 100_000.0


@dataclass
class BatteriesConfig:
    names: list[str] = field(default_factory=lambda: ["BAT0", "BAT1"])


@dataclass
class MediaConfig:
    players: list[str] = field(default_factory=lambda: ["spotify", "rhythmbox"])


@dataclass
class LoadConfig:
    warmup_minutes: float = 10.0


@dataclass
class RefreshConfig:
    interval_ms: int = 1000


@dataclass
class FontsConfig:
    mdi_dir: str = "~/.local/lib/barista/MaterialDesign-Webfont"


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class BarConfig:
    config_version: int = CONFIG_VERSION
    colors: ColorsConfig = field(default_factory=ColorsConfig)
    clicks: ClicksConfig = field(default_factory=ClicksConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    batteries: BatteriesConfig = field(default_factory=BatteriesConfig)
    media: MediaConfig = field(default_factory=MediaConfig)
    load: LoadConfig = field(default_factory=LoadConfig)
    refresh: RefreshConfig = field(default_factory=RefreshConfig)
    fonts: FontsConfig = field(default_factory=FontsConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    segments: list[str] = field(default_factory=lambda: list(SEGMENT_NAMES))


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "StatusBar"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "StatusBar"
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "statusbar"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _string_list(value: Any, default: list[str]) -> list[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        return list(default)
    return list(value)


def _normalize_colors(cfg: BarConfig) -> None:
    colors = cfg.colors
    if not isinstance(colors.scheme, str) or not colors.scheme:
        colors.scheme = ColorsConfig().scheme
    for name in COLOR_OVERRIDES:
        value = getattr(colors, name)
        if not isinstance(value, str) or not value.strip():
            setattr(colors, name, None)


def _normalize_clicks(cfg: BarConfig) -> None:
    defaults = ClicksConfig()
    cfg.clicks.task_manager = _string_list(cfg.clicks.task_manager, defaults.task_manager) or defaults.task_manager
    cfg.clicks.calendar = _string_list(cfg.clicks.calendar, defaults.calendar) or defaults.calendar


def _normalize_sources(cfg: BarConfig) -> None:
    cfg.network.reference_bytes_per_sec = float(max(1.0, float(cfg.network.reference_bytes_per_sec)))
    cfg.batteries.names = _string_list(cfg.batteries.names, BatteriesConfig().names)
    cfg.media.players = _string_list(cfg.media.players, MediaConfig().players)
    cfg.load.warmup_minutes = float(max(0.0, float(cfg.load.warmup_minutes)))


def _normalize_refresh(cfg: BarConfig) -> None:
    cfg.refresh.interval_ms = max(250, min(10_000, int(cfg.refresh.interval_ms)))
    cfg.diagnostics.keep_log_files = max(2, int(cfg.diagnostics.keep_log_files))


def _normalize_segments(cfg: BarConfig) -> None:
    names = _string_list(cfg.segments, list(SEGMENT_NAMES))
    cfg.segments = [n for i, n in enumerate(names) if n in SEGMENT_NAMES and n not in names[:i]]


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 kept the interface as a flat key and had no per-source sections.
        network = dict(data.get("network", {}) or {})
        if "network_interface" in data:
            network.setdefault("interface", data.pop("network_interface"))
        data["network"] = network
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> BarConfig:
    path = path or config_path()
    if not path.exists():
        return BarConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return BarConfig()
    if not isinstance(raw, dict):
        return BarConfig()

    data = _migrate(raw)
    cfg = BarConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        colors=_merge(ColorsConfig, data.get("colors", {})),
        clicks=_merge(ClicksConfig, data.get("clicks", {})),
        network=_merge(NetworkConfig, data.get("network", {})),
        batteries=_merge(BatteriesConfig, data.get("batteries", {})),
        media=_merge(MediaConfig, data.get("media", {})),
        load=_merge(LoadConfig, data.get("load", {})),
        refresh=_merge(RefreshConfig, data.get("refresh", {})),
        fonts=_merge(FontsConfig, data.get("fonts", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
        segments=data.get("segments", list(SEGMENT_NAMES)),
    )

    _normalize_colors(cfg)
    _normalize_clicks(cfg)
    _normalize_sources(cfg)
    _normalize_refresh(cfg)
    _normalize_segments(cfg)
    return cfg


def save_config(cfg: BarConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
