"""Load resolver options from ``setclass.yaml``."""

from __future__ import annotations

from pathlib import Path

import yaml

from setclass.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from setclass.exceptions import ConfigError
from setclass.model import ClassNameOptions


def load_options(root: Path, config_path: Path | None = None) -> ClassNameOptions:
    """Load resolver options from ``setclass.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return ClassNameOptions()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = set(raw) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(str(key) for key in unknown)}")

    prefix = raw.get("prefix")
    if prefix is not None and not isinstance(prefix, str):
        raise ConfigError("prefix must be a string")

    debug = raw.get("debug", False)
    if not isinstance(debug, bool):
        raise ConfigError("debug must be a boolean")

    return ClassNameOptions(prefix=prefix or None, debug=debug)


def merge_options(
    base: ClassNameOptions,
    *,
    prefix: str | None = None,
    debug: bool | None = None,
) -> ClassNameOptions:
    """Return *base* with any explicitly given overrides applied."""
    return ClassNameOptions(
        prefix=prefix if prefix is not None else base.prefix,
        debug=debug if debug is not None else base.debug,
    )
