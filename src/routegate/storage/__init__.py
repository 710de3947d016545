"""Routegate registry storage."""

from routegate.storage.loader import RegistryFileError, load_registry, load_users

__all__ = ["RegistryFileError", "load_registry", "load_users"]
