"""Tests for content-derived cache keys."""

from __future__ import annotations

from setclass import ClassNameOptions, Condition
from setclass.cache import conditions_fingerprint, resolver_fingerprint


def test_resolver_fingerprint_is_stable() -> None:
    options = ClassNameOptions(prefix="tw-")

    assert resolver_fingerprint({"foo": "bar"}, options) == resolver_fingerprint({"foo": "bar"}, options)


def test_resolver_fingerprint_ignores_key_order() -> None:
    options = ClassNameOptions()

    assert resolver_fingerprint({"a": 1, "b": 2}, options) == resolver_fingerprint({"b": 2, "a": 1}, options)


def test_resolver_fingerprint_changes_with_options() -> None:
    properties = {"foo": "bar"}

    plain = resolver_fingerprint(properties, ClassNameOptions())
    prefixed = resolver_fingerprint(properties, ClassNameOptions(prefix="tw-"))
    debug = resolver_fingerprint(properties, ClassNameOptions(debug=True))

    assert len({plain, prefixed, debug}) == 3


def test_resolver_fingerprint_distinguishes_value_types() -> None:
    options = ClassNameOptions()

    assert resolver_fingerprint({"on": True}, options) != resolver_fingerprint({"on": 1}, options)
    assert resolver_fingerprint({"on": "true"}, options) != resolver_fingerprint({"on": True}, options)


def test_conditions_fingerprint_is_content_derived() -> None:
    first = [{"when": {"foo": "bar"}, "use": "a b c"}, "d"]
    second = [{"use": "a b c", "when": {"foo": "bar"}}, "d"]

    assert first is not second
    assert conditions_fingerprint(first) == conditions_fingerprint(second)


def test_conditions_fingerprint_treats_dataclass_and_mapping_alike() -> None:
    as_mapping = [{"when": {"foo": "bar"}, "use": "a"}]
    as_dataclass = [Condition(use="a", when={"foo": "bar"})]

    assert conditions_fingerprint(as_mapping) == conditions_fingerprint(as_dataclass)


def test_conditions_fingerprint_depends_on_order() -> None:
    assert conditions_fingerprint(["a", "b"]) != conditions_fingerprint(["b", "a"])


def test_conditions_fingerprint_distinguishes_when_values() -> None:
    bar = [{"when": {"foo": "bar"}, "use": "a"}]
    buzz = [{"when": {"foo": "buzz"}, "use": "a"}]

    assert conditions_fingerprint(bar) != conditions_fingerprint(buzz)


def test_fingerprints_distinguish_key_types() -> None:
    options = ClassNameOptions()

    assert resolver_fingerprint({1: "x"}, options) != resolver_fingerprint({"1": "x"}, options)  # type: ignore[dict-item]
    assert conditions_fingerprint([{"when": {1: "x"}, "use": "a"}]) != conditions_fingerprint(
        [{"when": {"1": "x"}, "use": "a"}]
    )


def test_empty_when_differs_from_missing_when() -> None:
    assert conditions_fingerprint([{"when": {}, "use": "a"}]) != conditions_fingerprint([{"use": "a"}])
