"""Predicate evaluation of conditions against a property map."""

from __future__ import annotations

from setclass.model import ConditionLike, condition_when
from setclass.types.common import PropertyMap, PropValue

_MISSING = object()


def strict_equals(actual: PropValue | object, expected: PropValue) -> bool:
    """Compare two property values without cross-type coercion.

    Booleans only equal booleans, so ``True`` does not match ``1``. A
    property missing from the map never matches.
    """
    if actual is _MISSING:
        return False
    if isinstance(actual, bool) or isinstance(expected, bool):
        return type(actual) is type(expected) and actual == expected
    if isinstance(actual, (int, float)) and isinstance(expected, (int, float)):
        return actual == expected
    return type(actual) is type(expected) and actual == expected


def passes(properties: PropertyMap, condition: ConditionLike) -> bool:
    """Return whether *condition* is active for *properties*."""
    when = condition_when(condition)
    if when is None:
        return True
    return all(strict_equals(properties.get(key, _MISSING), expected) for key, expected in when.items())
