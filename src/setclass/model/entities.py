"""Core entities: conditions, resolver options and resolution reports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from setclass.types.common import JsonObject, PropertyMap


@dataclass(frozen=True)
class Condition:
    """Class text gated by an optional predicate over properties.

    ``when`` of ``None`` means the condition is always active; an empty
    mapping is also always active.
    """

    use: str = ""
    when: PropertyMap | None = None


type ConditionLike = str | Condition | Mapping[str, Any]


@dataclass(frozen=True)
class ClassNameOptions:
    """Options bound to a resolver at creation time."""

    prefix: str | None = None
    debug: bool = False


@dataclass(frozen=True)
class Resolution:
    """Detailed outcome of resolving one condition list."""

    class_name: str
    active: tuple[str, ...] = ()
    inactive: tuple[str, ...] = ()
    options: ClassNameOptions = field(default_factory=ClassNameOptions)

    def to_dict(self) -> JsonObject:
        """Return a JSON-serializable representation."""
        return {
            "class_name": self.class_name,
            "active": list(self.active),
            "inactive": list(self.inactive),
            "options": {
                "prefix": self.options.prefix,
                "debug": self.options.debug,
            },
        }


def condition_when(condition: ConditionLike) -> PropertyMap | None:
    """Return the predicate of *condition*, or ``None`` when it has none."""
    if isinstance(condition, str):
        return None
    if isinstance(condition, Condition):
        return condition.when
    return condition.get("when")


def condition_use(condition: ConditionLike) -> str:
    """Return the literal class text contributed by *condition*."""
    if isinstance(condition, str):
        return condition
    if isinstance(condition, Condition):
        return condition.use
    return condition.get("use") or ""
