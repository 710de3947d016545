"""Load route registries and users from YAML or JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from routegate.models.route import RouteDefinition
from routegate.models.user import User

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


class RegistryFileError(Exception):
    """Raised when a registry or users file cannot be read or parsed."""


def _read(path: Path) -> Any:
    if not path.exists():
        raise RegistryFileError(f"File not found: {path}")
    try:
        with open(path) as f:
            if path.suffix.lower() in _YAML_SUFFIXES:
                return yaml.safe_load(f)
            if path.suffix.lower() == ".json":
                return json.load(f)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        logger.warning("Failed to parse %s: %s", path, e)
        raise RegistryFileError(f"Could not parse {path}: {e}") from e
    raise RegistryFileError(f"Unsupported file type: {path.suffix or path.name}")


def _records(data: Any, key: str, path: Path) -> list[dict]:
    if isinstance(data, dict):
        data = data.get(key)
    if data is None:
        return []
    if not isinstance(data, list):
        raise RegistryFileError(f"Expected a list of {key} in {path}")
    return data


def load_registry(path: str | Path) -> list[RouteDefinition]:
    """Load route definitions from a top-level list or a ``routes`` key."""
    path = Path(path)
    records = _records(_read(path), "routes", path)
    try:
        routes = [RouteDefinition(**record) for record in records]
    except (TypeError, ValidationError) as e:
        raise RegistryFileError(f"Invalid route definition in {path}: {e}") from e
    logger.debug("Loaded %d route(s) from %s", len(routes), path)
    return routes


def load_users(path: str | Path) -> list[User]:
    """Load users from a top-level list or a ``users`` key."""
    path = Path(path)
    records = _records(_read(path), "users", path)
    try:
        return [User(**record) for record in records]
    except (TypeError, ValidationError) as e:
        raise RegistryFileError(f"Invalid user in {path}: {e}") from e
