"""Logging configuration for the API server and CLI jobs."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Install one stdout handler on the root logger; safe to call twice."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers:
        if getattr(handler, "_park_voting", False):
            handler.setLevel(level)
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._park_voting = True  # type: ignore[attr-defined]
    root.addHandler(handler)
