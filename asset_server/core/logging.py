"""Leveled logging with runtime-adjustable verbosity."""

from __future__ import annotations

import logging
import sys

LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}
DEFAULT_LEVEL = "info"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = DEFAULT_LEVEL) -> None:
    """Configure default logging if no handlers are present."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            format=LOG_FORMAT,
            datefmt="%Y-%m-%dT%H:%M:%S%z",
            stream=sys.stdout,
        )
    set_level(level)


def set_level(level: str) -> None:
    """Change the root level at runtime; unknown names mean ``info``."""
    logging.getLogger().setLevel(LEVELS.get((level or "").strip().lower(), logging.INFO))


def get_level() -> str:
    current = logging.getLogger().level
    for name, value in LEVELS.items():
        if value == current:
            return name
    return DEFAULT_LEVEL


__all__ = ["LEVELS", "configure_logging", "get_level", "set_level"]
