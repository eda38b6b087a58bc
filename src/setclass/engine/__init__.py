"""Condition evaluation and class text rendering."""

from .assemble import assemble, explain, filter_conditions
from .debug import join_debug_lines, render_debug, render_debug_line
from .predicate import passes, strict_equals
from .render import apply_prefix, collapse_whitespace, prefix_token, render_class_text

__all__ = [
    "apply_prefix",
    "assemble",
    "collapse_whitespace",
    "explain",
    "filter_conditions",
    "join_debug_lines",
    "passes",
    "prefix_token",
    "render_class_text",
    "render_debug",
    "render_debug_line",
    "strict_equals",
]
