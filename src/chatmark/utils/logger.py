"""Minimal logging utilities for chatmark.

Provides a get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure logging.

Example:
    >>> from chatmark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing message")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name, namespaced under "chatmark".

    Example:
        >>> get_logger("mymodule").name
        'chatmark.mymodule'
    """
    if not (name == "chatmark" or name.startswith("chatmark.")):
        name = f"chatmark.{name}"
    return logging.getLogger(name)
