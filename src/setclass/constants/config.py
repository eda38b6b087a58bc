"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "setclass.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"prefix", "debug"})
ALLOWED_CONDITION_KEYS: frozenset[str] = frozenset({"when", "use"})
CONDITIONS_DOCUMENT_KEY: str = "conditions"
