"""Click event parsing and launching of segment click actions."""

from __future__ import annotations

import json
import subprocess
import threading
from typing import Any, Callable, Iterable, Mapping

from statusbar_renderer.models import ClickAction

from .logging_setup import get_logger

BUTTONS = {1: "left", 2: "middle", 3: "right"}


def parse_click_line(line: str) -> dict[str, Any] | None:
    """Decode one line of the i3bar click stream (``[``, ``{...}``, ``,{...}``)."""
    stripped = line.strip().lstrip(",").strip()
    if not stripped or stripped in ("[", "]"):
        return None
    try:
        obj = json.loads(stripped)
    except json.JSONDecodeError:
        get_logger().warning("unparseable click event", extra={"event": "click_parse_error"})
        return None
    return obj if isinstance(obj, dict) else None


def _spawn(command: tuple[str, ...]) -> None:
    subprocess.Popen(
        list(command),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


class ClickDispatcher:
    def __init__(self, launcher: Callable[[tuple[str, ...]], None] | None = None) -> None:
        self._launch = launcher or _spawn
        self._actions: dict[str, ClickAction] = {}
        self._lock = threading.Lock()

    def update(self, actions: Mapping[str, ClickAction | None]) -> None:
        with self._lock:
            self._actions = {name: a for name, a in actions.items() if a is not None}

    def dispatch(self, event: Mapping[str, Any]) -> bool:
        name = event.get("name")
        button = BUTTONS.get(event.get("button"), "")
        with self._lock:
            action = self._actions.get(name) if isinstance(name, str) else None
        if action is None or action.button != button:
            return False
        try:
            self._launch(action.command)
        except OSError as exc:
            get_logger().warning(
                f"click launch failed: {exc}",
                extra={"event": "click_launch_error", "segment": name},
            )
            return False
        get_logger().info(f"launched {action.command[0]}", extra={"event": "click_launch", "segment": name})
        return True

    def serve(self, lines: Iterable[str]) -> None:
        for line in lines:
            event = parse_click_line(line)
            if event is not None:
                self.dispatch(event)
