"""Collect-all validation for ``setclass.yaml``."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from setclass.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from setclass.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005
from setclass.exceptions.validation import ValidationError


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint for a misspelled key, or an empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    return f"did you mean '{matches[0]}'?" if matches else ""


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a setclass.yaml file and return all validation errors.

    Never raises; every problem is returned as a :class:`ValidationError`.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}")
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(k) for k in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key '{key}'",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    prefix = raw.get("prefix")
    if prefix is not None and not isinstance(prefix, str):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="prefix",
                message=f"prefix must be a string, got {type(prefix).__name__}",
            )
        )

    if "debug" in raw and not isinstance(raw["debug"], bool):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="debug",
                message=f"debug must be a boolean, got {type(raw['debug']).__name__}",
            )
        )

    return errors
