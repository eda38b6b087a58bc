"""Core data models for setclass."""

from .entities import (
    ClassNameOptions,
    Condition,
    ConditionLike,
    Resolution,
    condition_use,
    condition_when,
)

__all__ = [
    "ClassNameOptions",
    "Condition",
    "ConditionLike",
    "Resolution",
    "condition_use",
    "condition_when",
]
