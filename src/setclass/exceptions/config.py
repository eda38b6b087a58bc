"""Configuration-related exceptions."""

from __future__ import annotations

from setclass.exceptions.base import SetClassError


class ConfigError(SetClassError, ValueError):
    """Raised when resolver options are invalid."""
