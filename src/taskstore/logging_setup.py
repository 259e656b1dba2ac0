# src/taskstore/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "taskstore"

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _console_filter(record: logging.LogRecord) -> bool:
    """Package logs pass; everything else (3rd party, py.warnings) only at ERROR+."""
    if record.name == PACKAGE_LOGGER or record.name.startswith(PACKAGE_LOGGER + "."):
        return True
    return record.levelno >= logging.ERROR


def log_level_from_name(name: str | None, default: int = logging.INFO) -> int:
    """Map "debug"/"INFO"/... to a logging level; unknown names give `default`."""
    level = logging.getLevelName(str(name or "").strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    *,
    app_name: str = "taskstore",
    log_dir: str | Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path | None:
    """
    Configure the root logger for the console app.

    stderr gets readable, filtered output at `console_level`. When `log_dir`
    is given, `<log_dir>/<app_name>.log` receives everything from `file_level` up.
    Replaces existing root handlers, so call it once at startup.
    Returns the log file path, or None without a file handler.
    """
    root = logging.getLogger()
    root.setLevel(min(console_level, file_level) if log_dir is not None else console_level)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_console_filter)
    root.addHandler(console)

    log_file: Path | None = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"{app_name}.log"

        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
