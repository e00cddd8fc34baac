"""Minimal logging utilities for memomark.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from memomark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering list")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "memomark." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("lists")
        >>> logger.name
        'memomark.lists'
    """
    if not (name == "memomark" or name.startswith("memomark.")):
        name = f"memomark.{name}"
    return logging.getLogger(name)
