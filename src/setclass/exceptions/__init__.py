"""Shared exception hierarchy for setclass."""

from __future__ import annotations

from .base import SetClassError
from .conditions import ConditionError
from .config import ConfigError

__all__ = [
    "ConditionError",
    "ConfigError",
    "SetClassError",
]
