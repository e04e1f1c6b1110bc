"""Logging helpers for the command line front-end."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

__all__ = ["configure_logging"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_COLOR_CODES = {
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
}


def _colorize_text(text: str, color: str) -> str:
    code = _COLOR_CODES.get(color, "0")
    return f"\033[{code}m{text}\033[0m"


class _ColourFormatter(logging.Formatter):
    COLOURS = {
        logging.DEBUG: "blue",
        logging.INFO: "green",
        logging.WARNING: "yellow",
        logging.ERROR: "red",
        logging.CRITICAL: "magenta",
    }

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        colour = self.COLOURS.get(record.levelno, "green")
        return _colorize_text(message, colour)


def configure_logging(verbose: bool, log_file: Optional[Path] = None) -> None:
    """Configure root logging handlers.

    Warnings always go to stderr; ``verbose`` lowers the threshold to DEBUG
    and colours the console output.  ``log_file`` additionally writes every
    record at the active level to a UTF-8 file, replacing earlier contents.
    """

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    level = logging.DEBUG if verbose else logging.WARNING
    root.setLevel(level)

    stream = logging.StreamHandler()
    if verbose:
        stream.setFormatter(_ColourFormatter("%(levelname)s: %(message)s"))
    else:
        stream.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(stream)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(file_handler)
