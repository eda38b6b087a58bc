"""Class text normalization and namespace-aware prefixing."""

from __future__ import annotations

from setclass.constants.rendering import (
    CLASS_SEPARATOR,
    NAMESPACE_MARKER_PATTERN,
    WHITESPACE_RUN_PATTERN,
    WORD_PATTERN,
)
from setclass.model import ClassNameOptions


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim the ends."""
    return WHITESPACE_RUN_PATTERN.sub(CLASS_SEPARATOR, text).strip()


def prefix_token(token: str, prefix: str) -> str:
    """Prefix every word in a single class token.

    Tokens carrying a namespace marker such as ``hover:`` are variant
    classes and are returned unchanged.
    """
    if NAMESPACE_MARKER_PATTERN.search(token):
        return token
    return WORD_PATTERN.sub(lambda match: f"{prefix}{match.group(0)}", token)


def apply_prefix(text: str, prefix: str | None) -> str:
    """Apply *prefix* to each space-separated token of collapsed *text*."""
    if not prefix:
        return text
    return CLASS_SEPARATOR.join(prefix_token(token, prefix) for token in text.split(CLASS_SEPARATOR))


def render_class_text(text: str, options: ClassNameOptions) -> str:
    """Render literal class text for output under *options*."""
    return apply_prefix(collapse_whitespace(text), options.prefix)
