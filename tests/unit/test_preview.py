import sys
import unittest
from datetime import timedelta
from pathlib import Path

try:
    from PIL import Image
except Exception:  # pragma: no cover
    Image = None

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "telemetry"))

from statusbar_renderer.segments import build_battery_segment, build_load_segment, build_network_segment
from statusbar_telemetry.models import BatteryInfo, BatteryStatus, LoadInfo, NetworkSpeeds


def segments():
    return [
        ("load", build_load_segment(LoadInfo(loads=(0.0, 5.0, 0.0), uptime=timedelta(hours=1)))),
        ("network", build_network_segment(NetworkSpeeds(rx_bytes_per_sec=50000, tx_bytes_per_sec=0))),
        ("battery-BAT0", build_battery_segment(BatteryInfo("BAT0", 4, BatteryStatus.DISCHARGING))),
    ]


class PreviewTests(unittest.TestCase):
    def test_render_image_size(self):
        if Image is None:
            self.skipTest("Pillow not installed")
        from statusbar_renderer.preview import BarPreviewRenderer

        img = BarPreviewRenderer(height=24).render_image(segments())
        self.assertEqual(img.size[1], 24)
        self.assertGreater(img.size[0], 40)

    def test_png_and_data_url(self):
        if Image is None:
            self.skipTest("Pillow not installed")
        from statusbar_renderer.preview import BarPreviewRenderer

        renderer = BarPreviewRenderer()
        self.assertTrue(renderer.render_png(segments()).startswith(b"\x89PNG"))
        self.assertTrue(renderer.preview_data_url([]).startswith("data:image/png;base64,"))


if __name__ == "__main__":
    unittest.main()
