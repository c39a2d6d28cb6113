"""Minimal logging utilities for modeline.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from modeline.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("modeline [%s]", line)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "modeline." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'modeline.mymodule'
    """
    if not (name == "modeline" or name.startswith("modeline.")):
        name = f"modeline.{name}"
    return logging.getLogger(name)
