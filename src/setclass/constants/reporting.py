"""Output format identifiers for the CLI."""

from __future__ import annotations

OUTPUT_FORMAT_TEXT: str = "text"
OUTPUT_FORMAT_JSON: str = "json"
VALID_OUTPUT_FORMATS: tuple[str, ...] = (OUTPUT_FORMAT_TEXT, OUTPUT_FORMAT_JSON)
