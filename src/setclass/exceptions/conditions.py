"""Condition document exceptions."""

from __future__ import annotations

from setclass.exceptions.base import SetClassError


class ConditionError(SetClassError, ValueError):
    """Raised when a conditions file cannot be loaded."""
