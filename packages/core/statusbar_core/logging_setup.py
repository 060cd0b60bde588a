"""Structured local logging and crash hook setup.

stdout belongs to the i3bar protocol, so console output goes to stderr only.
"""

from __future__ import annotations

import faulthandler
import json
import logging
import logging.handlers
import os
import sys
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import config_root


_LOGGER_NAME = "statusbar"
_EXTRA_FIELDS = ("event", "segment", "crash_id")


def log_dir() -> Path:
    path = config_root() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def _level() -> int:
    name = os.environ.get("STATUSBAR_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


class JsonFormatter(logging.Formatter):
    """One JSON object per line, carrying the ``extra`` tags set by callers."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(keep_files: int = 7, console: bool = True, directory: Path | None = None) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(_level())
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str((directory or log_dir()) / "statusbar.log"),
        when="midnight",
        backupCount=max(2, keep_files),
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    if console:
        stderr = logging.StreamHandler(sys.stderr)
        stderr.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(stderr)

    logger.debug("logging configured", extra={"event": "logging_configured"})
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def _report_crash(kind: str, exc_info) -> None:
    crash_id = str(uuid.uuid4())
    get_logger().critical(
        f"{kind} crash_id={crash_id}",
        exc_info=exc_info,
        extra={"event": kind.replace(" ", "_"), "crash_id": crash_id},
    )


def install_crash_hooks() -> None:
    sys.excepthook = lambda exc_type, exc, tb: _report_crash("uncaught exception", (exc_type, exc, tb))
    threading.excepthook = lambda args: _report_crash(
        "thread exception", (args.exc_type, args.exc_value, args.exc_traceback)
    )

    fault_log = (log_dir() / "fault.log").open("a", encoding="utf-8")
    faulthandler.enable(file=fault_log, all_threads=True)
    get_logger().info("crash hooks installed", extra={"event": "crash_hooks_installed"})
