"""Routegate configuration management."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_FILENAME = "routegate.yaml"
OUTPUT_FORMATS = ("table", "json")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Config:
    """Routegate configuration."""

    registry_path: Path = field(default_factory=lambda: Path("routes.yaml"))
    log_level: str = "INFO"
    strict: bool = False
    output_format: str = "table"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load config from defaults, then YAML file, then env vars."""
        config = cls()

        config_file = config_path or Path.cwd() / CONFIG_FILENAME
        if config_file.exists():
            with open(config_file) as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError(f"Expected a mapping in {config_file}")
            for key, value in data.items():
                if hasattr(config, key):
                    expected_type = type(getattr(config, key))
                    if isinstance(getattr(config, key), Path):
                        setattr(config, key, Path(value))
                    elif expected_type is bool and isinstance(value, str):
                        setattr(config, key, _parse_bool(value))
                    else:
                        setattr(config, key, expected_type(value))

        # Override from env
        env_registry = os.environ.get("ROUTEGATE_REGISTRY")
        if env_registry:
            config.registry_path = Path(env_registry)

        env_log = os.environ.get("ROUTEGATE_LOG_LEVEL")
        if env_log:
            config.log_level = env_log

        env_strict = os.environ.get("ROUTEGATE_STRICT")
        if env_strict:
            config.strict = _parse_bool(env_strict)

        if config.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {config.output_format}")
        if config.log_level.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {config.log_level}")

        return config

    def save(self, config_path: Path | None = None) -> None:
        """Save current config to YAML."""
        config_file = config_path or Path.cwd() / CONFIG_FILENAME
        config_file.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "registry_path": str(self.registry_path),
            "log_level": self.log_level,
            "strict": self.strict,
            "output_format": self.output_format,
        }
        with open(config_file, "w") as f:
            yaml.dump(data, f, default_flow_style=False)
