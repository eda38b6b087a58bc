"""Resolver objects and the cached factory that builds them."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType

from setclass.cache import MemoCache, conditions_fingerprint, resolver_fingerprint
from setclass.engine import assemble, explain
from setclass.model import ClassNameOptions, ConditionLike, Resolution
from setclass.types.common import PropertyMap

logger = logging.getLogger(__name__)


class Resolver:
    """Turn condition lists into class strings for one fixed property map.

    Results are memoized by the content of the condition list, so equal
    lists built from distinct objects share one cached string.
    """

    def __init__(self, properties: PropertyMap, options: ClassNameOptions) -> None:
        self._properties: PropertyMap = MappingProxyType(dict(properties))
        self._options = options
        self._results: MemoCache[str] = MemoCache("resolution")

    @property
    def properties(self) -> PropertyMap:
        return self._properties

    @property
    def options(self) -> ClassNameOptions:
        return self._options

    @property
    def cache(self) -> MemoCache[str]:
        return self._results

    def __call__(self, *conditions: ConditionLike) -> str:
        return self.resolve(conditions)

    def resolve(self, conditions: Iterable[ConditionLike]) -> str:
        """Resolve an ordered condition list, reusing a cached result when possible."""
        conditions = tuple(conditions)
        key = conditions_fingerprint(conditions)
        return self._results.get_or_create(key, lambda: assemble(self._properties, conditions, self._options))

    def explain(self, conditions: Iterable[ConditionLike]) -> Resolution:
        """Resolve *conditions* and report active and inactive class texts.

        Not memoized; intended for diagnostics.
        """
        conditions = tuple(conditions)
        return explain(self._properties, conditions, self._options)

    def __repr__(self) -> str:
        return f"Resolver(properties={dict(self._properties)!r}, options={self._options!r})"


class ResolverFactory:
    """Build resolvers, sharing one instance per property map and options."""

    def __init__(self) -> None:
        self._resolvers: MemoCache[Resolver] = MemoCache("resolver")

    @property
    def cache(self) -> MemoCache[Resolver]:
        return self._resolvers

    def create(
        self,
        properties: PropertyMap | None = None,
        options: ClassNameOptions | None = None,
    ) -> Resolver:
        """Return the resolver bound to *properties* and *options*."""
        props: PropertyMap = properties if properties is not None else {}
        opts = options if options is not None else ClassNameOptions()
        key = resolver_fingerprint(props, opts)
        return self._resolvers.get_or_create(key, lambda: self._build(props, opts))

    @staticmethod
    def _build(properties: PropertyMap, options: ClassNameOptions) -> Resolver:
        logger.debug(
            "Building resolver for %d properties (prefix=%r, debug=%s)",
            len(properties),
            options.prefix,
            options.debug,
        )
        return Resolver(properties, options)


DEFAULT_FACTORY: ResolverFactory = ResolverFactory()


def create_resolver(
    properties: PropertyMap | None = None,
    options: ClassNameOptions | None = None,
    *,
    factory: ResolverFactory | None = None,
) -> Resolver:
    """Return a cached resolver for *properties* and *options*.

    Uses the process-wide default factory unless *factory* is given.
    """
    return (factory or DEFAULT_FACTORY).create(properties, options)
