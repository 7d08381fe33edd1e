"""Minimal logging utilities for verlex.

Provides a simple get_logger function that wraps the standard library logging.
The package never installs handlers; that is left to the application.

Example:
    >>> from verlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning constraints")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "verlex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'verlex.mymodule'
    """
    if not (name == "verlex" or name.startswith("verlex.")):
        name = f"verlex.{name}"
    return logging.getLogger(name)
