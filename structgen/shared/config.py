"""Run configuration: connection settings and generation options."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Final

import yaml

from .errors import ConfigError

DEFAULT_PACKAGE_NAME: Final[str] = "DbStructs"
DEFAULT_TAG_LABEL: Final[str] = "db"


@dataclass(frozen=True, slots=True)
class ConnectionSettings:
    """Where to find the schema catalog and which schema to introspect."""

    host: str = "localhost"
    port: int = 3306
    db_user: str = "db_user"
    db_password: str = "db_pw"
    db_name: str = "bd_name"


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Options that shape the generated Go file.

    An empty ``tag_label`` disables field tags entirely.
    """

    package_name: str = DEFAULT_PACKAGE_NAME
    tag_label: str = DEFAULT_TAG_LABEL


@dataclass(frozen=True, slots=True)
class Configuration:
    connection: ConnectionSettings = field(default_factory=ConnectionSettings)
    generation: GenerationConfig = field(default_factory=GenerationConfig)

    def with_overrides(
        self,
        package_name: str | None = None,
        tag_label: str | None = None,
    ) -> Configuration:
        """Return a copy with command-line overrides applied."""
        generation = self.generation
        if package_name is not None:
            generation = replace(generation, package_name=package_name)
        if tag_label is not None:
            generation = replace(generation, tag_label=tag_label)
        return replace(self, generation=generation)


# Config file key -> (section, attribute, expected type)
_CONFIG_KEYS: Final[dict[str, tuple[str, str, type]]] = {
    "host": ("connection", "host", str),
    "port": ("connection", "port", int),
    "db_user": ("connection", "db_user", str),
    "db_password": ("connection", "db_password", str),
    "db_name": ("connection", "db_name", str),
    "pkg_name": ("generation", "package_name", str),
    "tag_label": ("generation", "tag_label", str),
}


def _read_config_file(config_path: Path) -> Any:
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {e}", str(config_path)) from e

    if config_path.suffix == ".json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON: {e}", str(config_path)) from e

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", str(config_path)) from e


def config_from_mapping(
    data: dict[str, Any],
    source: str | None = None,
) -> Configuration:
    """Build a Configuration from a decoded config mapping.

    Missing or null keys fall back to the defaults. Unknown keys are ignored.

    Raises:
        ConfigError: If a value has the wrong type.
    """
    sections: dict[str, dict[str, Any]] = {"connection": {}, "generation": {}}

    for key, (section, attribute, expected) in _CONFIG_KEYS.items():
        value = data.get(key)
        if value is None:
            continue
        # bool is an int subclass, but "port: true" is still a mistake
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ConfigError(
                f"'{key}' must be of type {expected.__name__}, "
                f"got {type(value).__name__}",
                source,
            )
        sections[section][attribute] = value

    return Configuration(
        connection=ConnectionSettings(**sections["connection"]),
        generation=GenerationConfig(**sections["generation"]),
    )


def load_config(config_path: Path | None = None) -> Configuration:
    """Load the run configuration.

    Args:
        config_path: JSON or YAML config file, or None for the defaults.

    Returns:
        The loaded configuration.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    if config_path is None:
        return Configuration()

    data = _read_config_file(config_path)

    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping", str(config_path))

    return config_from_mapping(data, str(config_path))
