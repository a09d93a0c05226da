"""Logging configuration for the taskdesk CLI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _PackageFilter(logging.Filter):
    """Keep taskdesk records on the console; other libraries only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "taskdesk" or record.name.startswith("taskdesk."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    console_level: int | str = logging.WARNING,
    log_file: str | Path | None = None,
    file_level: int = logging.DEBUG,
) -> None:
    """Configure the root logger.

    Console output goes to stderr so it never mixes with the task table.
    When ``log_file`` is given, every record is also written there.

    Call this once, before the first command runs.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_PackageFilter())
    root.addHandler(ch)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
