"""Shared test fixtures for routegate."""

from __future__ import annotations

from pathlib import Path

import pytest

from routegate.config import Config
from routegate.core.resolver import resolve_paths
from routegate.models import ResolvedRoute, RouteDefinition


@pytest.fixture
def registry() -> list[RouteDefinition]:
    return [
        RouteDefinition(path="/", parent=None, level=0),
        RouteDefinition(path="/admin", parent="/", level=5),
        RouteDefinition(path="/users", parent="/admin", level=2),
    ]


@pytest.fixture
def resolved(registry: list[RouteDefinition]) -> list[ResolvedRoute]:
    return resolve_paths(registry)


@pytest.fixture
def registry_file(tmp_path: Path) -> Path:
    path = tmp_path / "routes.yaml"
    path.write_text(
        "routes:\n"
        "  - {path: /, parent: null, level: 0}\n"
        "  - {path: /admin, parent: /, level: 5}\n"
        "  - {path: /users, parent: /admin, level: 2}\n"
    )
    return path


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(registry_path=tmp_path / "routes.yaml")
