"""User model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """A user and the access level granted to them."""

    model_config = ConfigDict(frozen=True)

    name: str
    level: int

    def to_response(self) -> dict:
        return {"name": self.name, "level": self.level}
