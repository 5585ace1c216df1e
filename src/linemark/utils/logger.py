"""Logging helper for linemark.

Wraps the standard library so every logger lives under the ``linemark``
namespace. The library never installs handlers; applications decide.

Example:
    >>> from linemark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("classifying line %d", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``linemark``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("scanner").name
        'linemark.scanner'
        >>> get_logger("linemark.parser").name
        'linemark.parser'
    """
    if not (name == "linemark" or name.startswith("linemark.")):
        name = f"linemark.{name}"
    return logging.getLogger(name)
