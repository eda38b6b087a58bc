"""Load condition lists from YAML documents.

A document is either a bare list or a mapping with a ``conditions`` list.
Each item is a class string or a mapping with ``use`` and optional ``when``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from setclass.constants.config import ALLOWED_CONDITION_KEYS, CONDITIONS_DOCUMENT_KEY
from setclass.constants.validation import COND001, COND002, COND003, COND004, COND005, COND006, COND007
from setclass.exceptions import ConditionError
from setclass.exceptions.validation import ValidationError, format_errors
from setclass.model import Condition, ConditionLike

_SCALAR_TYPES: tuple[type, ...] = (str, bool, int, float)


def parse_conditions(raw: Any, path: str) -> tuple[list[ConditionLike], list[ValidationError]]:
    """Convert a parsed YAML document into conditions, collecting every error."""
    errors: list[ValidationError] = []
    items = raw.get(CONDITIONS_DOCUMENT_KEY) if isinstance(raw, dict) else raw
    if not isinstance(items, list):
        errors.append(
            ValidationError(
                code=COND003,
                path=path,
                field="",
                message=f"document must be a list or a mapping with a '{CONDITIONS_DOCUMENT_KEY}' list",
            )
        )
        return [], errors

    conditions: list[ConditionLike] = []
    for index, item in enumerate(items):
        field_name = f"conditions[{index}]"
        if isinstance(item, str):
            conditions.append(item)
            continue
        if not isinstance(item, dict):
            errors.append(
                ValidationError(
                    code=COND004,
                    path=path,
                    field=field_name,
                    index=index,
                    message=f"condition must be a string or a mapping, got {type(item).__name__}",
                )
            )
            continue

        item_errors = _check_condition_mapping(item, path, index)
        errors.extend(item_errors)
        if not item_errors:
            when = item.get("when")
            conditions.append(Condition(use=item["use"], when=dict(when) if when is not None else None))

    return conditions, errors


def _check_condition_mapping(item: dict[Any, Any], path: str, index: int) -> list[ValidationError]:
    field_name = f"conditions[{index}]"
    errors: list[ValidationError] = []
    unknown = sorted(str(key) for key in set(item) - ALLOWED_CONDITION_KEYS)
    if unknown:
        errors.append(
            ValidationError(
                code=COND005,
                path=path,
                field=field_name,
                message=f"unknown condition keys: {unknown}",
                index=index,
            )
        )

    if not isinstance(item.get("use"), str):
        errors.append(
            ValidationError(
                code=COND006,
                path=path,
                field=f"{field_name}.use",
                message="use must be a string",
                index=index,
            )
        )

    when = item.get("when")
    if when is not None:
        if not isinstance(when, dict):
            errors.append(
                ValidationError(
                    code=COND007,
                    path=path,
                    field=f"{field_name}.when",
                    message=f"when must be a mapping, got {type(when).__name__}",
                    index=index,
                )
            )
        else:
            for key, value in when.items():
                if not isinstance(key, str) or not (value is None or isinstance(value, _SCALAR_TYPES)):
                    errors.append(
                        ValidationError(
                            code=COND007,
                            path=path,
                            field=f"{field_name}.when.{key}",
                            message="when values must be strings, booleans, numbers or null",
                            index=index,
                        )
                    )
    return errors


def _read_document(path: Path) -> tuple[Any, list[ValidationError]]:
    path_str = str(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        return None, [ValidationError(code=COND001, path=path_str, field="", message=f"cannot read file: {exc}")]
    try:
        return yaml.safe_load(text), []
    except yaml.YAMLError as exc:
        return None, [ValidationError(code=COND002, path=path_str, field="", message=f"invalid YAML: {exc}")]


def validate_conditions_file(path: Path) -> list[ValidationError]:
    """Validate a conditions document and return all validation errors."""
    resolved = path.resolve()
    raw, errors = _read_document(resolved)
    if errors:
        return errors
    _, errors = parse_conditions(raw, str(resolved))
    return errors


def load_conditions(path: Path) -> tuple[ConditionLike, ...]:
    """Load a conditions document, raising ConditionError on any problem."""
    resolved = path.resolve()
    conditions: list[ConditionLike] = []
    raw, errors = _read_document(resolved)
    if not errors:
        conditions, errors = parse_conditions(raw, str(resolved))
    if errors:
        raise ConditionError(format_errors(errors))
    return tuple(conditions)
