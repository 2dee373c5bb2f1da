"""
FILE: weekplan/logging_setup.py
PURPOSE: Logging configuration for CLI and REPL
EXPORTS:
  - setup_logging(console_level, log_file) -> None
DEPENDENCIES:
  - logging, sys, pathlib (stdlib)
NOTES:
  - Call once at startup, before the first log line
  - Console output goes to stderr so it never mixes with --json output
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the interactive console readable:
    - allow weekplan logs at the configured level
    - third-party loggers (prompt_toolkit, asyncio) only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "weekplan" or record.name.startswith("weekplan."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    console_level: int = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure the root logger with:
    - Console handler on stderr, filtered
    - Optional file handler with full logs for debugging
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
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
