"""Routegate — absolute route paths and inherited access levels."""

from routegate.auth.permissions import NO_ACCESS, access_granted
from routegate.core.errors import (
    CyclicRegistryError,
    DuplicateRouteError,
    MalformedRegistryError,
    RegistryError,
)
from routegate.core.resolver import (
    ROOT_MARKER,
    RouteResolver,
    has_access,
    list_accessible_paths,
    resolve_paths,
)
from routegate.models import ResolvedRoute, RouteDefinition, User

__all__ = [
    "NO_ACCESS",
    "ROOT_MARKER",
    "CyclicRegistryError",
    "DuplicateRouteError",
    "MalformedRegistryError",
    "RegistryError",
    "ResolvedRoute",
    "RouteDefinition",
    "RouteResolver",
    "User",
    "access_granted",
    "has_access",
    "list_accessible_paths",
    "resolve_paths",
]
