"""Registry errors raised while resolving or validating route definitions."""

from __future__ import annotations


class RegistryError(Exception):
    """Base class for malformed route registries."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class MalformedRegistryError(RegistryError, LookupError):
    """Raised when a route references a parent that is not in the registry."""

    def __init__(self, path: str, parent: str) -> None:
        super().__init__(f"Parent not found for route {path!r}: {parent!r}", path)
        self.parent = parent


class DuplicateRouteError(RegistryError, ValueError):
    """Raised when two route definitions share the same path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Duplicate route path: {path!r}", path)


class CyclicRegistryError(RegistryError):
    """Raised when a route's ancestor chain loops back on itself."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Cyclic parent chain starting at route {path!r}", path)
