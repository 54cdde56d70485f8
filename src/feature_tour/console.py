"""Logging setup and section headings for console output."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from colored import attr, fg, stylize

LOGGER_NAME = "feature_tour"
HEADING_STYLE = fg("cyan") + attr("bold")


def setup_logging(level: int = logging.WARNING, stream: TextIO | None = None) -> logging.Logger:
    """Configure the package logger to write diagnostics to stderr."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def color_enabled(no_color: bool = False, stream: TextIO | None = None) -> bool:
    target = stream if stream is not None else sys.stdout
    if no_color:
        return False
    isatty = getattr(target, "isatty", None)
    return bool(isatty and isatty())


def announce(title: str, *, color: bool = False) -> None:
    """Print a section heading, coloured when ``color`` is set."""
    print(stylize(title, HEADING_STYLE) if color else title)
