"""MPRIS media player probing through the playerctl command-line tool."""

from __future__ import annotations

import shutil
import subprocess
from datetime import timedelta

from .models import MediaInfo, PlaybackStatus

_SEP = "\x1f"
_FORMAT = _SEP.join(["{{status}}", "{{artist}}", "{{title}}", "{{position}}", "{{mpris:length}}"])


def _disconnected(player: str) -> MediaInfo:
    return MediaInfo(
        player=player,
        artist="",
        title="",
        position=timedelta(0),
        length=timedelta(0),
        playback_status=PlaybackStatus.DISCONNECTED,
    )


def _micros(value: str) -> timedelta:
    try:
        return timedelta(microseconds=max(int(value), 0))
    except ValueError:
        return timedelta(0)


def parse_playerctl_line(player: str, line: str) -> MediaInfo:
    fields = line.rstrip("\n").split(_SEP)
    if len(fields) != 5:
        return _disconnected(player)
    status, artist, title, position, length = fields
    try:
        playback = PlaybackStatus(status.strip())
    except ValueError:
        playback = PlaybackStatus.DISCONNECTED
    return MediaInfo(
        player=player,
        artist=artist,
        title=title,
        position=_micros(position),
        length=_micros(length),
        playback_status=playback,
    )


class PlayerctlProbe:
    def __init__(self, executable: str = "playerctl", timeout_s: float = 1.0) -> None:
        self.executable = executable
        self.timeout_s = timeout_s

    def available(self) -> bool:
        return shutil.which(self.executable) is not None

    def poll(self, player: str) -> MediaInfo:
        try:
            proc = subprocess.run(
                [self.executable, "--player", player, "metadata", "--format", _FORMAT],
                capture_output=True,
                text=True,
                timeout=self.timeout_s,
                check=False,
            )
        except (OSError, subprocess.SubprocessError):
            return _disconnected(player)
        if proc.returncode != 0 or not proc.stdout.strip():
            return _disconnected(player)
        return parse_playerctl_line(player, proc.stdout)
