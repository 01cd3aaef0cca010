"""Content-addressed parse cache for chatmark.

Provides (content_hash, config_hash) -> Document caching so that re-rendering
an unchanged message (chat history re-render, switching conversations) does
not re-parse it.

Thread Safety:
    DictParseCache is not thread-safe. For parallel parsing, use a cache
    implementation with internal locking (e.g. threading.Lock around get/put).

Example:
    >>> from chatmark import parse, DictParseCache
    >>> cache = DictParseCache()
    >>> doc1 = parse("# Hello", cache=cache)
    >>> doc2 = parse("# Hello", cache=cache)  # Cache hit, no re-parse
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from chatmark.utils.hashing import hash_str

if TYPE_CHECKING:
    from chatmark.config import FeatureConfig
    from chatmark.nodes import Document


class ParseCache(Protocol):
    """Protocol for content-addressed parse caches.

    Cache key is (content_hash, config_hash). Cached value is an immutable
    Document, safe to share across threads.
    """

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        """Return cached Document if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        """Store Document in cache."""
        ...


class DictParseCache:
    """In-memory parse cache using a dict.

    Not thread-safe. For parallel parsing, wrap with a lock.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], Document] = {}

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        """Return cached Document if present, else None."""
        return self._data.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        """Store Document in cache."""
        self._data[(content_hash, config_hash)] = doc

    def __len__(self) -> int:
        return len(self._data)


def hash_content(source: str) -> str:
    """Compute the SHA256 hex digest of source for the cache key."""
    return hash_str(source)


def hash_config(config: FeatureConfig) -> str:
    """Compute the hash of a FeatureConfig for the cache key."""
    parts = (
        str(config.supports_tables),
        str(config.supports_links),
        str(config.max_heading_level),
        config.heading_decoration,
    )
    return hash_str("|".join(parts))


__all__ = [
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
]
