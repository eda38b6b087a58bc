"""Memoization caches and their fingerprint keys."""

from .fingerprint import condition_payload, conditions_fingerprint, resolver_fingerprint
from .store import MemoCache

__all__ = [
    "MemoCache",
    "condition_payload",
    "conditions_fingerprint",
    "resolver_fingerprint",
]
