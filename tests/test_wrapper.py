"""Tests for injecting resolvers into component callables."""

from __future__ import annotations

from typing import Any

import pytest

from setclass import ClassNameOptions, ResolverFactory, usable_properties, with_set_class_name
from setclass.resolver import Resolver
from setclass.wrapper import is_object_like

A_VARIANT = {"when": {"type": "A"}, "use": "a"}
AB_VARIANT = {"when": {"type": "A", "color": "B"}, "use": "ab"}


def button(*, set_class_name: Resolver, type: str | None = None, **props: Any) -> dict[str, Any]:
    return {"class_name": set_class_name(A_VARIANT, AB_VARIANT), **props}


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("text", False),
        (3, False),
        (True, False),
        (None, False),
        ({"a": 1}, True),
        ([1, 2], True),
        (lambda: None, True),
    ],
    ids=["str", "int", "bool", "none", "dict", "list", "callable"],
)
def test_is_object_like(value: object, expected: bool) -> None:
    assert is_object_like(value) is expected


def test_usable_properties_drops_object_like_values() -> None:
    props = {"id": "1", "type": "A", "children": ["x"], "style": {"color": "red"}, "on_click": print}

    assert usable_properties(props) == {"id": "1", "type": "A"}


def test_usable_properties_merges_defaults_under_props() -> None:
    assert usable_properties({"type": "B"}, {"type": "A", "color": "D"}) == {"type": "B", "color": "D"}


@pytest.mark.parametrize(
    ("props", "expected"),
    [
        ({"id": "1", "type": "C", "color": "D"}, ""),
        ({"id": "2", "type": "A", "color": "D"}, "a"),
        ({"id": "3", "type": "A", "color": "B"}, "a ab"),
    ],
    ids=["no_classes", "type_classes", "type_color_classes"],
)
def test_wrapper_reacts_to_prop_changes(factory: ResolverFactory, props: dict[str, Any], expected: str) -> None:
    wrapped = with_set_class_name(button, factory=factory)

    assert wrapped(**props)["class_name"] == expected


def test_wrapper_passes_debug_option(factory: ResolverFactory) -> None:
    wrapped = with_set_class_name(button, ClassNameOptions(debug=True), factory=factory)

    assert wrapped(type="A", color="B")["class_name"] == "\r\n• a\r\n• ab"


def test_wrapper_passes_prefix_option(factory: ResolverFactory) -> None:
    wrapped = with_set_class_name(button, ClassNameOptions(prefix="tw-"), factory=factory)

    assert wrapped(type="A", color="B")["class_name"] == "tw-a tw-ab"


def test_wrapper_uses_default_props(factory: ResolverFactory) -> None:
    def card(*, set_class_name: Resolver, **props: Any) -> str:
        return set_class_name(A_VARIANT)

    card.default_props = {"type": "A"}  # type: ignore[attr-defined]
    wrapped = with_set_class_name(card, factory=factory)

    assert wrapped() == "a"
    assert wrapped(type="C") == ""


def test_wrapper_forwards_props_and_sets_display_name(factory: ResolverFactory) -> None:
    wrapped = with_set_class_name(button, factory=factory)

    result = wrapped(id="foo", type="A", children=["child"])

    assert result["id"] == "foo"
    assert result["children"] == ["child"]
    assert wrapped.display_name == "with_set_class_name(button)"  # type: ignore[attr-defined]


def test_wrapper_shares_resolvers_for_equal_props(factory: ResolverFactory) -> None:
    wrapped = with_set_class_name(button, factory=factory)

    wrapped(type="A", color="B", children=["x"])
    wrapped(color="B", type="A", children=["y"])

    assert factory.cache.stats()["size"] == 1
