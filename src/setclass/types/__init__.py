"""Shared type aliases for setclass."""

from .cache import CacheStats
from .common import JsonObject, JsonScalar, JsonValue, PropertyMap, PropValue

__all__ = [
    "CacheStats",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "PropValue",
    "PropertyMap",
]
