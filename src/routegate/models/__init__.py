"""Routegate data models."""

from routegate.models.route import ResolvedRoute, RouteDefinition
from routegate.models.user import User

__all__ = ["ResolvedRoute", "RouteDefinition", "User"]
