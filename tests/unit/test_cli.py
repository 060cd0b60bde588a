import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "desktop"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "telemetry"))

from statusbar_app.cli import _scheme, build_parser
from statusbar_core.config import BarConfig, load_config


class CliTests(unittest.TestCase):
    def test_run_command(self):
        parser = build_parser()
        args = parser.parse_args(["run"])
        self.assertEqual(args.command, "run")
        self.assertIsNone(args.ticks)

    def test_run_with_ticks(self):
        args = build_parser().parse_args(["run", "--ticks", "3"])
        self.assertEqual(args.ticks, 3)

    def test_once_command(self):
        args = build_parser().parse_args(["once", "--json"])
        self.assertEqual(args.command, "once")
        self.assertTrue(args.json)

    def test_preview_command(self):
        args = build_parser().parse_args(["preview", "--out", "bar.png"])
        self.assertEqual(args.command, "preview")
        self.assertEqual(args.out, "bar.png")
        self.assertEqual(args.height, 24)

    def test_doctor_command(self):
        args = build_parser().parse_args(["doctor"])
        self.assertEqual(args.command, "doctor")


class SchemeFromConfigTests(unittest.TestCase):
    def _load(self, colors):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"config_version": 2, "colors": colors}), encoding="utf-8")
            return load_config(path)

    def test_named_scheme_keeps_its_tier_colors(self):
        scheme = _scheme(self._load({"scheme": "Solarized"}))
        self.assertEqual(scheme.name, "Solarized")
        self.assertEqual(scheme.good, "#859900")
        self.assertEqual(scheme.bad, "#dc322f")
        self.assertEqual(scheme.dim_icon, "#586e75")

    def test_explicit_override_wins_over_scheme(self):
        scheme = _scheme(self._load({"scheme": "Solarized", "bad": "#f00"}))
        self.assertEqual(scheme.bad, "#f00")
        self.assertEqual(scheme.degraded, "#b58900")

    def test_default_config_uses_default_scheme(self):
        scheme = _scheme(BarConfig())
        self.assertEqual((scheme.good, scheme.degraded, scheme.bad, scheme.dim_icon), ("#6d6", "#dd6", "#d66", "#777"))


if __name__ == "__main__":
    unittest.main()
