"""Bar runner: samples telemetry, builds segments and streams i3bar output."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from datetime import timedelta
from typing import IO, Callable, Iterable

from statusbar_renderer.i3bar import I3barStream
from statusbar_renderer.models import ClickAction, DisplayDescriptor
from statusbar_renderer.segments import (
    build_battery_segment,
    build_clock_segment,
    build_cpu_segment,
    build_load_segment,
    build_media_segment,
    build_memory_segment,
    build_network_segment,
    build_temperature_segment,
)
from statusbar_telemetry.models import MetricSnapshot

from .clicks import ClickDispatcher
from .config import BarConfig
from .logging_setup import get_logger

Segment = tuple[str, DisplayDescriptor]


@dataclass(frozen=True)
class SegmentOptions:
    task_manager: ClickAction
    calendar: ClickAction
    reference_bytes_per_sec: float
    warmup: timedelta

    @classmethod
    def from_config(cls, cfg: BarConfig) -> "SegmentOptions":
        return cls(
            task_manager=ClickAction(command=tuple(cfg.clicks.task_manager)),
            calendar=ClickAction(command=tuple(cfg.clicks.calendar)),
            reference_bytes_per_sec=cfg.network.reference_bytes_per_sec,
            warmup=timedelta(minutes=cfg.load.warmup_minutes),
        )


def _segments_for(name: str, snap: MetricSnapshot, opts: SegmentOptions) -> list[tuple[str, DisplayDescriptor | None]]:
    if name == "media":
        return [(f"media-{m.player}", build_media_segment(m)) for m in snap.media]
    if name == "battery":
        return [(f"battery-{b.name}", build_battery_segment(b)) for b in snap.batteries]
    if name == "load":
        return [(name, build_load_segment(snap.load, click=opts.task_manager, warmup=opts.warmup))]
    if name == "memory":
        return [(name, build_memory_segment(snap.memory, click=opts.task_manager))]
    if name == "temperature":
        if snap.temperature is None:
            return []
        return [(name, build_temperature_segment(snap.temperature))]
    if name == "network":
        return [(name, build_network_segment(snap.network, reference_max=opts.reference_bytes_per_sec))]
    if name == "cpu":
        return [(name, build_cpu_segment(snap.cpu))]
    if name == "clock":
        return [(name, build_clock_segment(snap.clock, click=opts.calendar))]
    raise KeyError(name)


def build_segments(snap: MetricSnapshot, order: Iterable[str], opts: SegmentOptions) -> list[Segment]:
    """Build visible segments in bar order; a failing builder only drops its own segment."""
    out: list[Segment] = []
    for name in order:
        try:
            built = _segments_for(name, snap, opts)
        except Exception as exc:
            get_logger().error(
                f"segment build failed: {exc}",
                exc_info=True,
                extra={"event": "segment_error", "segment": name},
            )
            continue
        out.extend((seg_name, d) for seg_name, d in built if d is not None)
    return out


class BarRunner:
    def __init__(
        self,
        cfg: BarConfig,
        provider,
        stream: I3barStream,
        dispatcher: ClickDispatcher | None = None,
        clicks_in: IO[str] | None = None,
    ) -> None:
        self.cfg = cfg
        self.provider = provider
        self.stream = stream
        self.dispatcher = dispatcher or ClickDispatcher()
        self.clicks_in = clicks_in if clicks_in is not None else sys.stdin
        self.options = SegmentOptions.from_config(cfg)
        self._stop = threading.Event()
        self._lock = threading.Lock()
        self._latest: list[Segment] = []
        self._ticks = 0

    @property
    def latest(self) -> list[Segment]:
        with self._lock:
            return list(self._latest)

    def tick(self) -> list[Segment]:
        snap = self.provider.poll()
        segments = build_segments(snap, self.cfg.segments, self.options)
        self.dispatcher.update({name: d.click_action for name, d in segments})
        self.stream.write(segments)
        with self._lock:
            self._latest = segments
            self._ticks += 1
        return segments

    def stop(self) -> None:
        self._stop.set()

    def _serve_clicks(self) -> None:
        try:
            self.dispatcher.serve(self.clicks_in)
        except (OSError, ValueError) as exc:
            get_logger().warning(f"click stream closed: {exc}", extra={"event": "click_stream_closed"})

    def run(self, max_ticks: int | None = None, sleep: Callable[[float], bool] | None = None) -> int:
        wait = sleep or self._stop.wait
        interval_s = self.cfg.refresh.interval_ms / 1000.0

        self.stream.start()
        threading.Thread(target=self._serve_clicks, name="statusbar-clicks", daemon=True).start()
        get_logger().info("bar started", extra={"event": "bar_started"})

        rounds = 0
        while not self._stop.is_set():
            rounds += 1
            try:
                self.tick()
            except Exception as exc:
                get_logger().error(f"tick failed: {exc}", exc_info=True, extra={"event": "tick_error"})
            if max_ticks is not None and rounds >= max_ticks:
                break
            if wait(interval_s):
                break

        get_logger().info("bar stopped", extra={"event": "bar_stopped"})
        return self._ticks
