"""Typed cache statistics payload."""

from __future__ import annotations

from typing import TypedDict


class CacheStats(TypedDict):
    """Counters reported by a memo cache."""

    hits: int
    misses: int
    size: int
