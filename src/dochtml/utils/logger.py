"""Minimal logging utilities for dochtml.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from dochtml.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering package")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "dochtml." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'dochtml.mymodule'
    """
    if not (name == "dochtml" or name.startswith("dochtml.")):
        name = f"dochtml.{name}"
    return logging.getLogger(name)
