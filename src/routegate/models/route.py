"""Route models: registry definitions and their resolved form."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RouteDefinition(BaseModel):
    """A registry entry: a path segment, its parent's path and its own level."""

    model_config = ConfigDict(frozen=True)

    path: str
    parent: str | None = None
    level: int


class ResolvedRoute(BaseModel):
    """A route's absolute path and the access level inherited from its ancestors."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    absolute_path: str = Field(alias="absolutePath")
    access: int

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
