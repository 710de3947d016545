"""Route resolver — absolute paths, inherited access levels, access checks."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from routegate.auth.permissions import NO_ACCESS, access_granted, can_view
from routegate.core.errors import CyclicRegistryError, MalformedRegistryError
from routegate.core.validation import validate_registry
from routegate.models.route import ResolvedRoute, RouteDefinition
from routegate.models.user import User

logger = logging.getLogger(__name__)

ROOT_MARKER = "/"


def _index_registry(registry: Sequence[RouteDefinition]) -> dict[str, RouteDefinition]:
    """Map each path to its definition. The first definition of a path wins."""
    index: dict[str, RouteDefinition] = {}
    for route in registry:
        if route.path in index:
            logger.warning("Duplicate route path %r shadowed by earlier definition", route.path)
            continue
        index[route.path] = route
    return index


def _find_parent(
    index: dict[str, RouteDefinition], route: RouteDefinition, parent: str
) -> RouteDefinition:
    try:
        return index[parent]
    except KeyError:
        raise MalformedRegistryError(route.path, parent) from None


def _prepend_segment(segment: str, absolute_path: str) -> str:
    """Prefix an ancestor's segment, skipping the root marker to avoid '//'."""
    return segment + absolute_path if segment != ROOT_MARKER else absolute_path


def _resolve_route(route: RouteDefinition, index: dict[str, RouteDefinition]) -> ResolvedRoute:
    absolute_path = route.path
    access = route.level
    current_parent = route.parent

    # Every step moves one ancestor up; a chain longer than the registry loops.
    steps = 0
    while current_parent:
        steps += 1
        if steps > len(index):
            raise CyclicRegistryError(route.path)

        parent = _find_parent(index, route, current_parent)
        absolute_path = _prepend_segment(parent.path, absolute_path)
        access = max(access, parent.level)
        current_parent = parent.parent

    return ResolvedRoute(absolute_path=absolute_path, access=access)


def resolve_paths(registry: Sequence[RouteDefinition]) -> list[ResolvedRoute]:
    """Resolve every route's absolute path and minimum access level.

    The access level of a route is the highest level found along its ancestor
    chain, so a child can never be less restricted than its parent. Results
    keep the order of ``registry``.

    Raises:
        MalformedRegistryError: a parent reference does not match any path.
        CyclicRegistryError: an ancestor chain never reaches a root.
    """
    index = _index_registry(registry)
    resolved = []
    for route in registry:
        result = _resolve_route(route, index)
        logger.debug(
            "Resolved %r -> %r (access %d)", route.path, result.absolute_path, result.access
        )
        resolved.append(result)
    return resolved


def _required_access(path: str, resolved: Iterable[ResolvedRoute]) -> int:
    for route in resolved:
        if route.absolute_path == path:
            return route.access
    return NO_ACCESS


def has_access(user: User, path: str, resolved: Sequence[ResolvedRoute]) -> bool:
    """Check if ``user`` may access the route at absolute ``path``.

    ``resolved`` must come from :func:`resolve_paths`; no ancestor walk happens
    here. Unknown paths are denied for every user.
    """
    return access_granted(_required_access(path, resolved), user.level)


def list_accessible_paths(user: User, resolved: Sequence[ResolvedRoute]) -> list[ResolvedRoute]:
    """Return the resolved routes ``user`` may access, in their original order."""
    return [route for route in resolved if has_access(user, route.absolute_path, resolved)]


class RouteResolver:
    """Resolves a registry once and answers access questions against it."""

    def __init__(self, registry: Sequence[RouteDefinition], *, strict: bool = False) -> None:
        if strict:
            validate_registry(registry)

        self.routes: tuple[ResolvedRoute, ...] = tuple(resolve_paths(registry))
        self._access: dict[str, int] = {}
        for route in self.routes:
            self._access.setdefault(route.absolute_path, route.access)

    def __len__(self) -> int:
        return len(self.routes)

    def access_for(self, path: str) -> int:
        """Required access for ``path``, or ``NO_ACCESS`` when it is unknown."""
        return self._access.get(path, NO_ACCESS)

    def has_access(self, user: User, path: str) -> bool:
        return can_view(user, self.access_for(path))

    def accessible_paths(self, user: User) -> list[ResolvedRoute]:
        return [route for route in self.routes if self.has_access(user, route.absolute_path)]
