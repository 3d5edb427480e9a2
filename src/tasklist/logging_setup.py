"""Logging configuration for tasklist."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """Keep our own records; let third-party loggers through only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "tasklist" or record.name.startswith("tasklist."):
            return True
        return record.levelno >= logging.ERROR


def verbosity_to_level(verbose: int, default: str = "WARNING") -> int:
    """Map a repeated -v count onto a console log level."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.getLevelName(default)


def setup_logging(
    *,
    level: int | str = logging.WARNING,
    log_file: str | Path | None = None,
    file_level: int | str = logging.DEBUG,
) -> None:
    """Configure root logging with a stderr handler and an optional file handler.

    Existing root handlers are replaced, so calling this again (e.g. from
    tests) does not duplicate output.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
