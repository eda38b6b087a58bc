"""Inject a resolver into component-style callables.

A component is any callable taking keyword properties. The wrapper keeps
only scalar properties, resolves them through a factory and passes the
resulting resolver as ``set_class_name``.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping
from typing import Any

from setclass.model import ClassNameOptions
from setclass.resolver import DEFAULT_FACTORY, ResolverFactory
from setclass.types.common import PropertyMap

SET_CLASS_NAME_KWARG: str = "set_class_name"


def is_object_like(value: object) -> bool:
    """Return whether *value* is structured rather than a scalar property."""
    return not (value is None or isinstance(value, (str, bytes, bool, int, float)))


def usable_properties(props: Mapping[str, Any], defaults: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Merge *defaults* under *props* and drop object-like values."""
    merged = {**(defaults or {}), **props}
    return {key: value for key, value in merged.items() if not is_object_like(value)}


def with_set_class_name[R](
    component: Callable[..., R],
    options: ClassNameOptions | None = None,
    *,
    factory: ResolverFactory | None = None,
) -> Callable[..., R]:
    """Wrap *component* so it receives a resolver bound to its scalar props."""
    resolvers = factory or DEFAULT_FACTORY
    display_name = getattr(component, "display_name", None) or getattr(component, "__name__", "Component")

    @functools.wraps(component)
    def wrapped(**props: Any) -> R:
        defaults: Mapping[str, Any] = getattr(component, "default_props", None) or {}
        properties: PropertyMap = usable_properties(props, defaults)
        resolver = resolvers.create(properties, options)
        forwarded = dict(props)
        forwarded[SET_CLASS_NAME_KWARG] = resolver
        return component(**forwarded)

    wrapped.display_name = f"with_set_class_name({display_name})"  # type: ignore[attr-defined]
    return wrapped
