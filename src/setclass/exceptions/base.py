"""Root exception for setclass."""

from __future__ import annotations


class SetClassError(Exception):
    """Base class for all setclass errors."""
