"""Annotated trace rendering for debug mode."""

from __future__ import annotations

from collections.abc import Sequence

from setclass.constants.rendering import (
    CLASS_SEPARATOR,
    DEBUG_FAIL_MARKER,
    DEBUG_JOINER,
    DEBUG_LINE_BREAK,
    DEBUG_PASS_MARKER,
)
from setclass.engine.predicate import passes
from setclass.engine.render import render_class_text
from setclass.model import ClassNameOptions, ConditionLike, condition_use
from setclass.types.common import PropertyMap


def render_debug_line(text: str, *, active: bool) -> str:
    """Mark one rendered class text as active or inactive."""
    if active:
        return f"{DEBUG_PASS_MARKER} {text}"
    return f"{DEBUG_FAIL_MARKER}{DEBUG_JOINER}{text.replace(CLASS_SEPARATOR, DEBUG_JOINER)}"


def render_debug(
    properties: PropertyMap,
    conditions: Sequence[ConditionLike],
    options: ClassNameOptions,
) -> list[str]:
    """Return one annotated line per condition, in input order."""
    return [
        render_debug_line(
            render_class_text(condition_use(condition), options),
            active=passes(properties, condition),
        )
        for condition in conditions
    ]


def join_debug_lines(lines: Sequence[str]) -> str:
    """Join debug lines with CRLF, offset by one leading CRLF."""
    return DEBUG_LINE_BREAK + DEBUG_LINE_BREAK.join(lines)
