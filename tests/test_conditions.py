"""Tests for loading condition documents from YAML."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from setclass import Condition
from setclass.conditions import load_conditions, parse_conditions, validate_conditions_file
from setclass.constants.validation import ALL_COND_CODES, COND001, COND002, COND003, COND004, COND005, COND006, COND007
from setclass.exceptions import ConditionError
from setclass.exceptions.validation import sort_errors


def test_load_conditions_from_mapping_document(write_conditions: Callable[..., Path]) -> None:
    path = write_conditions(
        {
            "conditions": [
                "base",
                {"use": "a b c", "when": {"foo": "bar", "on": True}},
                {"use": "always"},
            ]
        }
    )

    assert load_conditions(path) == (
        "base",
        Condition(use="a b c", when={"foo": "bar", "on": True}),
        Condition(use="always"),
    )


def test_load_conditions_from_bare_list(write_conditions: Callable[..., Path]) -> None:
    path = write_conditions(["a", {"use": "b", "when": {}}])

    assert load_conditions(path) == ("a", Condition(use="b", when={}))


def test_load_conditions_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConditionError, match=COND001):
        load_conditions(tmp_path / "missing.yaml")


def test_load_conditions_reports_every_problem(write_conditions: Callable[..., Path]) -> None:
    path = write_conditions([42, {"use": 3}, {"use": "x", "when": "nope"}, {"use": "y", "extra": 1}])

    with pytest.raises(ConditionError) as exc_info:
        load_conditions(path)

    message = str(exc_info.value)
    for code in (COND004, COND005, COND006, COND007):
        assert code in message


def test_validate_conditions_file_valid(write_conditions: Callable[..., Path]) -> None:
    path = write_conditions({"conditions": ["a", {"use": "b", "when": {"size": 2, "x": None}}]})

    assert validate_conditions_file(path) == []


def test_validate_conditions_file_bad_yaml(tmp_path: Path) -> None:
    path = tmp_path / "conditions.yaml"
    path.write_text("conditions: [\n", encoding="utf-8")

    assert [e.code for e in validate_conditions_file(path)] == [COND002]


@pytest.mark.parametrize(
    "document",
    [{"items": []}, "just text", None],
    ids=["wrong_key", "scalar", "empty"],
)
def test_parse_conditions_rejects_non_list_documents(document: object) -> None:
    conditions, errors = parse_conditions(document, "inline")

    assert conditions == []
    assert [e.code for e in errors] == [COND003]


def test_parse_conditions_rejects_nested_when_values() -> None:
    _, errors = parse_conditions([{"use": "a", "when": {"foo": ["bar"]}}], "inline")

    assert [e.field for e in errors] == ["conditions[0].when.foo"]
    assert all(e.code in ALL_COND_CODES for e in errors)


def test_condition_errors_sort_by_position() -> None:
    document = ["ok"] * 12
    document[10] = {"use": 1}
    document[2] = {"use": 2}

    _, errors = parse_conditions(document, "inline")

    assert [e.index for e in errors] == [2, 10]
    assert [e.field for e in sort_errors(errors)] == ["conditions[2].use", "conditions[10].use"]
