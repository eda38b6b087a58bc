"""Structured validation error model for options and condition files."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """A single validation error with stable code and location context.

    ``index`` is the position of the offending condition in a conditions
    document, so errors sort by position rather than by field text.
    """

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    index: int | None = None

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        location = self.path
        if self.field:
            location = f"{location}#{self.field}"
        parts = [f"[{self.code}]", location, self.message]
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Sort validation errors by code, path, condition position, then field."""
    return sorted(errors, key=lambda e: (e.code, e.path, -1 if e.index is None else e.index, e.field))


def format_errors(errors: list[ValidationError]) -> str:
    """Format a list of validation errors as a multi-line string."""
    return "\n".join(e.format() for e in sort_errors(errors))
