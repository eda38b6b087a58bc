"""Resolver options loading and validation.

This package facade re-exports the public names so callers can use
``from setclass.config import ...``.
"""

from __future__ import annotations

from setclass.config.loader import load_options, merge_options
from setclass.config.validator import validate_config_file

__all__ = [
    "load_options",
    "merge_options",
    "validate_config_file",
]
