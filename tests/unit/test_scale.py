import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "telemetry"))

from statusbar_renderer.models import RawColor
from statusbar_renderer.scale import grey, level_glyph, scale, throughput_color


class ScaleTests(unittest.TestCase):
    def test_endpoints_and_clamp(self):
        self.assertEqual(scale(0, 100000, 200), 0)
        self.assertEqual(scale(100000, 100000, 200), 200)
        self.assertEqual(scale(200000, 100000, 200), 200)
        self.assertEqual(scale(-5, 100000, 200), 0)
        self.assertEqual(scale(50000, 100000, 200), 100)

    def test_floor(self):
        self.assertEqual(scale(999, 100000, 200), 1)
        self.assertEqual(scale(499, 100000, 200), 0)

    def test_monotonic(self):
        previous = -1
        for value in range(0, 200001, 997):
            current = scale(value, 100000, 200)
            self.assertGreaterEqual(current, previous)
            previous = current

    def test_non_positive_max(self):
        self.assertEqual(scale(10, 0, 200), 0)


class GreyTests(unittest.TestCase):
    def test_grey_clamps(self):
        self.assertEqual(grey(-10), RawColor(0, 0, 0))
        self.assertEqual(grey(300).to_hex(), "#ffffff")
        self.assertEqual(grey(128).to_hex(), "#808080")

    def test_throughput_color(self):
        self.assertEqual(throughput_color(0).to_hex(), "#373737")
        self.assertEqual(throughput_color(100000).to_hex(), "#ffffff")
        self.assertEqual(throughput_color(10**7).to_hex(), "#ffffff")
        self.assertEqual(throughput_color(50000), grey(155))

    def test_hex_parsing(self):
        self.assertEqual(RawColor.hex("#f70").to_hex(), "#ff7700")
        self.assertEqual(RawColor.hex("6d6d6d"), grey(0x6D))
        with self.assertRaises(ValueError):
            RawColor.hex("#12345")


class LevelGlyphTests(unittest.TestCase):
    def test_levels(self):
        self.assertEqual(level_glyph(0, 100), "")
        self.assertEqual(level_glyph(12, 100), "")
        self.assertEqual(level_glyph(12.5, 100), "▁")
        self.assertEqual(level_glyph(50, 100), "▄")
        self.assertEqual(level_glyph(100, 100), "█")
        self.assertEqual(level_glyph(250, 100), "█")


if __name__ == "__main__":
    unittest.main()
