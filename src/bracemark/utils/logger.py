"""Minimal logging utilities for Bracemark.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from bracemark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Block directive %r at %d", b"note", 0)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "bracemark." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'bracemark.mymodule'
    """
    if not (name == "bracemark" or name.startswith("bracemark.")):
        name = f"bracemark.{name}"
    return logging.getLogger(name)
