"""Content-derived cache keys for resolvers and resolutions."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping, Sequence

from setclass.model import ClassNameOptions, ConditionLike, condition_use, condition_when
from setclass.types.common import PropertyMap


def _digest(payload: object) -> str:
    blob = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=repr).encode("utf-8")
    return hashlib.sha256(blob).hexdigest()


def _property_items(properties: Mapping[str, object] | None) -> list[object] | None:
    """Return sorted items tagged with the key type so ``1`` and ``"1"`` differ."""
    if properties is None:
        return None
    items = [[type(key).__name__, str(key), value] for key, value in properties.items()]
    return sorted(items, key=lambda item: (item[0], item[1]))


def resolver_fingerprint(properties: PropertyMap, options: ClassNameOptions) -> str:
    """Return a stable hash of a property map together with resolver options.

    Key order does not affect the hash, so maps built in different orders
    share a resolver.
    """
    return _digest(
        {
            "properties": _property_items(properties),
            "prefix": options.prefix,
            "debug": options.debug,
        }
    )


def condition_payload(condition: ConditionLike) -> dict[str, object]:
    """Return the canonical JSON payload identifying one condition."""
    if isinstance(condition, str):
        return {"literal": condition}
    return {
        "when": _property_items(condition_when(condition)),
        "use": condition_use(condition),
    }


def conditions_fingerprint(conditions: Sequence[ConditionLike]) -> str:
    """Return a stable hash of an ordered condition list."""
    return _digest([condition_payload(condition) for condition in conditions])
