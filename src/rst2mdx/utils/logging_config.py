"""Logging setup shared by the command-line driver and scripts."""

from __future__ import annotations

import logging

from rst2mdx.config import RST2MDX_LOG_LEVEL

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging once for a command-line run.

    Args:
        verbose: If True, log at DEBUG regardless of ``RST2MDX_LOG_LEVEL``.
    """
    level = logging.DEBUG if verbose else _resolve_level(RST2MDX_LOG_LEVEL)
    logging.basicConfig(level=level, format=_LOG_FORMAT, force=True)


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name``."""
    return logging.getLogger(name)


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.INFO
