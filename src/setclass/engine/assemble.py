"""Assemble the final class string for one resolver call."""

from __future__ import annotations

from collections.abc import Sequence

from setclass.constants.rendering import CLASS_SEPARATOR
from setclass.engine.debug import join_debug_lines, render_debug
from setclass.engine.predicate import passes
from setclass.engine.render import render_class_text
from setclass.model import ClassNameOptions, ConditionLike, Resolution, condition_use
from setclass.types.common import PropertyMap


def filter_conditions(properties: PropertyMap, conditions: Sequence[ConditionLike]) -> list[ConditionLike]:
    """Keep only the conditions whose predicate passes."""
    return [condition for condition in conditions if passes(properties, condition)]


def assemble(
    properties: PropertyMap,
    conditions: Sequence[ConditionLike],
    options: ClassNameOptions,
) -> str:
    """Resolve *conditions* into a class string, or a debug trace in debug mode."""
    if options.debug:
        return join_debug_lines(render_debug(properties, conditions, options))

    return CLASS_SEPARATOR.join(
        render_class_text(condition_use(condition), options)
        for condition in filter_conditions(properties, conditions)
    )


def explain(
    properties: PropertyMap,
    conditions: Sequence[ConditionLike],
    options: ClassNameOptions,
) -> Resolution:
    """Resolve *conditions* and report which rendered texts were active."""
    active: list[str] = []
    inactive: list[str] = []
    for condition in conditions:
        text = render_class_text(condition_use(condition), options)
        (active if passes(properties, condition) else inactive).append(text)
    return Resolution(
        class_name=assemble(properties, conditions, options),
        active=tuple(active),
        inactive=tuple(inactive),
        options=options,
    )
