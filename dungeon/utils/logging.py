"""Logging setup shared by the terminal game and the API server."""

from __future__ import annotations

import logging
import sys
from typing import IO

LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s"

# One line per HTTP request drowns out the game log
_NOISY_LOGGERS = ("uvicorn.access",)


def setup_logging(level: str = "INFO", stream: IO[str] | None = None) -> None:
    """Configure the root logger.

    Records go to stderr by default: in terminal play stdout carries the
    rendered frames.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
