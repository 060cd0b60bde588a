"""CLI entrypoints for the status bar, one-shot sampling, previews and diagnostics."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from statusbar_core import COLOR_OVERRIDES, BarConfig, BarRunner, SegmentOptions, build_doctor_payload, build_segments, load_config
from statusbar_core.logging_setup import configure_logging, get_logger, install_crash_hooks
from statusbar_renderer import GlyphRegistry, I3barEncoder, I3barStream, scheme_from_map
from statusbar_renderer.themes import ColorScheme
from statusbar_telemetry import TelemetryProvider


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str, ensure_ascii=False))


def _scheme(cfg: BarConfig) -> ColorScheme:
    colors = cfg.colors
    overrides = {name: getattr(colors, name) for name in COLOR_OVERRIDES if getattr(colors, name)}
    return scheme_from_map(overrides, base=colors.scheme)


def _glyphs(cfg: BarConfig) -> GlyphRegistry:
    registry = GlyphRegistry()
    registry.load_mdi(Path(cfg.fonts.mdi_dir))
    return registry


def _provider(cfg: BarConfig) -> TelemetryProvider:
    return TelemetryProvider(
        interface=cfg.network.interface,
        batteries=cfg.batteries.names,
        players=cfg.media.players,
    )


def _sample_segments(cfg: BarConfig):
    snap = _provider(cfg).poll()
    return build_segments(snap, cfg.segments, SegmentOptions.from_config(cfg))


def cmd_run(args: argparse.Namespace) -> int:
    cfg = load_config()
    install_crash_hooks()
    stream = I3barStream(sys.stdout, I3barEncoder(_scheme(cfg), _glyphs(cfg)))
    runner = BarRunner(cfg, _provider(cfg), stream)
    try:
        runner.run(max_ticks=args.ticks)
    except KeyboardInterrupt:
        runner.stop()
    return 0


def cmd_once(args: argparse.Namespace) -> int:
    cfg = load_config()
    segments = _sample_segments(cfg)
    if args.json:
        _print_json([{"name": name, **asdict(d)} for name, d in segments])
    else:
        encoder = I3barEncoder(_scheme(cfg), _glyphs(cfg))
        print(json.dumps(encoder.status_line(segments), ensure_ascii=False))
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    from statusbar_renderer.preview import BarPreviewRenderer

    cfg = load_config()
    icon_font = Path(cfg.fonts.mdi_dir).expanduser() / "fonts" / "materialdesignicons-webfont.ttf"
    renderer = BarPreviewRenderer(
        scheme=_scheme(cfg),
        glyphs=_glyphs(cfg),
        height=args.height,
        icon_font_path=icon_font if icon_font.exists() else None,
    )
    out = Path(args.out).expanduser().resolve()
    out.write_bytes(renderer.render_png(_sample_segments(cfg)))
    _print_json({"success": True, "out": str(out)})
    return 0


def cmd_doctor(_args: argparse.Namespace) -> int:
    _print_json(build_doctor_payload(load_config()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="statusbar", description="i3bar status line with system metrics")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="Stream the i3bar protocol on stdout")
    run_cmd.add_argument("--ticks", type=int, default=None, help="Stop after this many status lines")
    run_cmd.set_defaults(func=cmd_run)

    once_cmd = sub.add_parser("once", help="Sample once and print one status line")
    once_cmd.add_argument("--json", action="store_true", help="Print segment descriptors instead of i3bar blocks")
    once_cmd.set_defaults(func=cmd_once)

    preview_cmd = sub.add_parser("preview", help="Render the current status line to a PNG")
    preview_cmd.add_argument("--out", required=True, help="Output PNG path")
    preview_cmd.add_argument("--height", type=int, default=24)
    preview_cmd.set_defaults(func=cmd_preview)

    doctor_cmd = sub.add_parser("doctor", help="Print detected metric sources and config")
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(keep_files=load_config().diagnostics.keep_log_files, console=False)
    try:
        return int(args.func(args))
    except Exception as exc:
        get_logger().error(f"{args.command} failed: {exc}", exc_info=True, extra={"event": "command_failed"})
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
