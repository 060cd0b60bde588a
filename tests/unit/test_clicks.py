import sys
import unittest
from pathlib import Path
from unittest.mock import patch

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "telemetry"))

from statusbar_core.clicks import ClickDispatcher, parse_click_line
from statusbar_renderer.models import ClickAction
from statusbar_renderer.segments import CALENDAR, TASK_MANAGER


class ParseClickLineTests(unittest.TestCase):
    def test_framing_lines(self):
        self.assertIsNone(parse_click_line("["))
        self.assertIsNone(parse_click_line("   "))

    def test_event_lines(self):
        self.assertEqual(parse_click_line('{"name": "load", "button": 1}'), {"name": "load", "button": 1})
        self.assertEqual(parse_click_line(',{"name": "clock", "button": 3}\n'), {"name": "clock", "button": 3})

    def test_garbage(self):
        self.assertIsNone(parse_click_line("{oops"))
        self.assertIsNone(parse_click_line("[1, 2]"))


class ClickDispatcherTests(unittest.TestCase):
    def setUp(self):
        self.launched = []
        self.dispatcher = ClickDispatcher(launcher=self.launched.append)
        self.dispatcher.update({"load": TASK_MANAGER, "clock": CALENDAR, "battery-BAT0": None})

    def test_left_click_launches(self):
        self.assertTrue(self.dispatcher.dispatch({"name": "load", "button": 1}))
        self.assertEqual(self.launched, [("gnome-system-monitor",)])

    def test_other_buttons_and_segments_ignored(self):
        self.assertFalse(self.dispatcher.dispatch({"name": "load", "button": 3}))
        self.assertFalse(self.dispatcher.dispatch({"name": "battery-BAT0", "button": 1}))
        self.assertFalse(self.dispatcher.dispatch({"name": "nope", "button": 1}))
        self.assertFalse(self.dispatcher.dispatch({"button": 1}))
        self.assertEqual(self.launched, [])

    def test_right_button_action(self):
        self.dispatcher.update({"clock": ClickAction(command=("cal",), button="right")})
        self.assertFalse(self.dispatcher.dispatch({"name": "clock", "button": 1}))
        self.assertTrue(self.dispatcher.dispatch({"name": "clock", "button": 3}))
        self.assertEqual(self.launched, [("cal",)])

    def test_launch_failure_is_reported(self):
        def boom(_command):
            raise FileNotFoundError("gsimplecal")

        dispatcher = ClickDispatcher(launcher=boom)
        dispatcher.update({"clock": CALENDAR})
        self.assertFalse(dispatcher.dispatch({"name": "clock", "button": 1}))

    def test_serve_stream(self):
        self.dispatcher.serve(["[\n", '{"name": "clock", "button": 1}\n', ',{"name": "load", "button": 1}\n'])
        self.assertEqual(self.launched, [("gsimplecal",), ("gnome-system-monitor",)])

    def test_default_launcher_uses_popen(self):
        with patch("statusbar_core.clicks.subprocess.Popen") as popen:
            dispatcher = ClickDispatcher()
            dispatcher.update({"clock": CALENDAR})
            self.assertTrue(dispatcher.dispatch({"name": "clock", "button": 1}))
            popen.assert_called_once()
            self.assertEqual(popen.call_args[0][0], ["gsimplecal"])
            self.assertTrue(popen.call_args[1]["start_new_session"])


if __name__ == "__main__":
    unittest.main()
