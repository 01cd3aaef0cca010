"""Hashing utilities for chatmark cache keys.

Example:
    >>> from chatmark.utils.hashing import hash_str
    >>> hash_str("hello world", truncate=16)
    'b94d27b9934d3e08'
"""

import hashlib


def hash_str(
    content: str,
    truncate: int | None = None,
    algorithm: str = "sha256",
) -> str:
    """Hash string content using the given algorithm.

    Args:
        content: String content to hash
        truncate: Truncate result to N characters (None = full hash)
        algorithm: Hash algorithm name accepted by hashlib ('sha256', 'md5')

    Returns:
        Hex digest of hash, optionally truncated
    """
    hasher = hashlib.new(algorithm)
    hasher.update(content.encode("utf-8"))
    digest = hasher.hexdigest()
    return digest[:truncate] if truncate is not None else digest
