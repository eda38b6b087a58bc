"""setclass - conditional utility class names resolved against component properties."""

from __future__ import annotations

from setclass.model import ClassNameOptions, Condition, ConditionLike, Resolution
from setclass.resolver import DEFAULT_FACTORY, Resolver, ResolverFactory, create_resolver
from setclass.wrapper import usable_properties, with_set_class_name

__version__ = "1.2.0"

__all__ = [
    "DEFAULT_FACTORY",
    "ClassNameOptions",
    "Condition",
    "ConditionLike",
    "Resolution",
    "Resolver",
    "ResolverFactory",
    "__version__",
    "create_resolver",
    "usable_properties",
    "with_set_class_name",
]
