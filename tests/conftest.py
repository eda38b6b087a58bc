"""Shared pytest fixtures for setclass tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

from setclass import ResolverFactory


@pytest.fixture()
def factory() -> ResolverFactory:
    """Return an isolated resolver factory so cache state never leaks between tests."""
    return ResolverFactory()


@pytest.fixture()
def write_conditions(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that dumps a conditions document to a YAML file."""

    def _write(document: object, name: str = "conditions.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(document, sort_keys=False, allow_unicode=True), encoding="utf-8")
        return path

    return _write
