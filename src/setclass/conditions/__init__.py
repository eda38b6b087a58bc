"""Condition documents read from disk."""

from .document import load_conditions, parse_conditions, validate_conditions_file

__all__ = ["load_conditions", "parse_conditions", "validate_conditions_file"]
