"""In-memory memo cache keyed by fingerprint strings."""

from __future__ import annotations

import logging
from collections.abc import Callable

from setclass.types.cache import CacheStats

logger = logging.getLogger(__name__)


class MemoCache[T]:
    """Content-keyed store with hit/miss counters.

    Entries live as long as the cache object; there is no eviction, so
    callers should keep the variety of keys bounded. No locking is done.
    """

    def __init__(self, name: str = "memo") -> None:
        self._name = name
        self._entries: dict[str, T] = {}
        self._hits = 0
        self._misses = 0

    def get_or_create(self, key: str, factory: Callable[[], T]) -> T:
        """Return the cached value for *key*, building it with *factory* on a miss."""
        try:
            value = self._entries[key]
        except KeyError:
            self._misses += 1
            value = factory()
            self._entries[key] = value
            logger.debug("%s cache miss: stored %s", self._name, key[:12])
            return value
        self._hits += 1
        return value

    def stats(self) -> CacheStats:
        """Return hit/miss counters and current size."""
        return {
            "hits": self._hits,
            "misses": self._misses,
            "size": len(self._entries),
        }

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
