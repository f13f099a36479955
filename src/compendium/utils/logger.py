"""Centralized logger configuration.

Usage:
    from compendium.utils.logger import get_logger
    logger = get_logger(__name__)

curses owns the terminal while the viewer runs, so records go to a file
unless ``log_file`` is None.
"""
from __future__ import annotations

import logging
import os

DEFAULT_LEVEL = os.getenv("COMPENDIUM_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = DEFAULT_LEVEL, log_file: str | None = None) -> None:
    handlers: list[logging.Handler]
    if log_file:
        handlers = [logging.FileHandler(log_file, encoding="utf-8")]
    else:
        handlers = [logging.StreamHandler()]
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
