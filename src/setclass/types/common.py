"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Mapping

type PropValue = str | bool | int | float | None
type PropertyMap = Mapping[str, PropValue]

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
type JsonObject = dict[str, JsonValue]
