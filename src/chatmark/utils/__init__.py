"""Utility modules for chatmark.

Provides:
- text: escape_html, plain_text
- hashing: hash_str for cache keys
- logger: get_logger for logging
"""

from chatmark.utils.hashing import hash_str
from chatmark.utils.logger import get_logger
from chatmark.utils.text import escape_html, plain_text

__all__ = [
    "escape_html",
    "get_logger",
    "hash_str",
    "plain_text",
]
