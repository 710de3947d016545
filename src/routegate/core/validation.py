"""Upfront registry validation: duplicate paths, missing parents, cycles."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from routegate.core.errors import (
    CyclicRegistryError,
    DuplicateRouteError,
    MalformedRegistryError,
    RegistryError,
)
from routegate.models.route import RouteDefinition

logger = logging.getLogger(__name__)

DUPLICATE = "duplicate"
MISSING_PARENT = "missing_parent"
CYCLE = "cycle"


@dataclass(frozen=True)
class RegistryProblem:
    """A single defect found in a registry."""

    kind: str
    path: str
    parent: str | None = None

    @property
    def message(self) -> str:
        if self.kind == DUPLICATE:
            return f"Duplicate route path: {self.path!r}"
        if self.kind == MISSING_PARENT:
            return f"Parent not found for route {self.path!r}: {self.parent!r}"
        return f"Cyclic parent chain starting at route {self.path!r}"

    def to_error(self) -> RegistryError:
        if self.kind == DUPLICATE:
            return DuplicateRouteError(self.path)
        if self.kind == MISSING_PARENT:
            return MalformedRegistryError(self.path, self.parent or "")
        return CyclicRegistryError(self.path)


def _walk_chain(path: str, parents: dict[str, str | None], done: set[str]) -> str | None:
    """Walk up from ``path``, returning the first route of a loop if one is found.

    Every route on the walk, including those leading into a loop, is added to
    ``done`` so each loop is reported once.
    """
    chain: list[str] = []
    on_chain: set[str] = set()
    current: str | None = path
    loop_start = None
    while current and current in parents and current not in done:
        if current in on_chain:
            loop_start = current
            break
        chain.append(current)
        on_chain.add(current)
        current = parents[current]
    done.update(chain)
    return loop_start


def find_registry_problems(registry: Sequence[RouteDefinition]) -> list[RegistryProblem]:
    """Collect every problem in ``registry`` without raising."""
    problems: list[RegistryProblem] = []
    parents: dict[str, str | None] = {}

    for route in registry:
        if route.path in parents:
            problems.append(RegistryProblem(DUPLICATE, route.path))
            continue
        parents[route.path] = route.parent

    for route in registry:
        if route.parent and route.parent not in parents:
            problems.append(RegistryProblem(MISSING_PARENT, route.path, route.parent))

    done: set[str] = set()
    for path in parents:
        loop_start = _walk_chain(path, parents, done)
        if loop_start is not None:
            problems.append(RegistryProblem(CYCLE, loop_start))

    if problems:
        logger.info("Registry has %d problem(s)", len(problems))
    return problems


def validate_registry(registry: Sequence[RouteDefinition]) -> None:
    """Raise the first problem found in ``registry``, if any."""
    problems = find_registry_problems(registry)
    if problems:
        raise problems[0].to_error()
