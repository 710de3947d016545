"""Access-level checks for resolved routes."""

from __future__ import annotations

from routegate.models.user import User

NO_ACCESS = -1


def access_granted(access: int, level: int) -> bool:
    """Check if a user level satisfies a route's required access level.

    ``NO_ACCESS`` marks a route that does not exist, so it is never granted
    regardless of how high ``level`` is.
    """
    return access > NO_ACCESS and level >= access


def can_view(user: User, access: int) -> bool:
    """Check if a user may view a route requiring ``access``."""
    return access_granted(access, user.level)
