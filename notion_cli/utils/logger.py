"""Shared logger initialization for notion-cli.

Usage:
    from notion_cli.utils.logger import get_logger
    log = get_logger(__name__)
    log.debug("message")
"""
from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_DEFAULT_HANDLER = RichHandler(
    console=Console(stderr=True), rich_tracebacks=True, show_path=False
)

_FORMAT = "%(message)s"  # rich handler already adds time & level

DEFAULT_LEVEL = logging.WARNING


def configure_logging(level: int = DEFAULT_LEVEL) -> None:
    """Idempotently configure root logger with a nicer handler."""
    root = logging.getLogger()
    if _DEFAULT_HANDLER in root.handlers:
        return
    root.setLevel(level)
    _DEFAULT_HANDLER.setLevel(level)
    _DEFAULT_HANDLER.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(_DEFAULT_HANDLER)


def set_level(level: int) -> None:
    """Change the level of the root logger and its rich handler (``--verbose``)."""
    configure_logging(level)
    logging.getLogger().setLevel(level)
    _DEFAULT_HANDLER.setLevel(level)


def get_logger(name: str = __name__, level: Optional[int] = None) -> logging.Logger:
    """Return a module-level logger (configuring root on first call)."""
    configure_logging()
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
