"""Configuration management for dbrestore."""

from __future__ import annotations

import textwrap
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from dbrestore.config.file_ops import write_text_file
from dbrestore.config.paths import default_config_path, default_work_dir
from dbrestore.platform.logging import logger


_TEMPLATE = textwrap.dedent(
    """
    # dbrestore Configuration File

    # Log file path (optional)
    # Where to store the application logs
    # Example: log_file = "/path/to/logs/dbrestore.log"

    # Working directory (optional)
    # Backups are copied and decompressed here before they are loaded
    # Example: working_dir = "/tmp/dbrestore"

    # Storage services that hold backup files
    # [storage.local]
    # type = "local"
    # root = "/var/backups/"

    # Database connections that backups can be restored into
    # [database.production]
    # type = "mysql"          # mysql or postgresql
    # host = "localhost"
    # port = 3306
    # user = "root"
    # pass = "secret"
    # database = "app"
    """
).strip() + "\n"


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the TOML document cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the parsed document is semantically invalid."""


@dataclass(slots=True, frozen=True)
class StorageSettings:
    """Connection settings for a named storage service."""

    name: str
    type: str
    root: str = ""


@dataclass(slots=True, frozen=True)
class DatabaseSettings:
    """Connection settings for a named database."""

    name: str
    type: str
    host: str = "localhost"
    port: int | None = None
    user: str = ""
    password: str = ""
    database: str = ""


@dataclass
class Config:
    """Application configuration."""

    log_file: Path | None = None
    working_dir: Path | None = None
    storage: dict[str, StorageSettings] = field(default_factory=dict)
    databases: dict[str, DatabaseSettings] = field(default_factory=dict)

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects."""

        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file) if self.log_file.strip() else None
        if isinstance(self.working_dir, str):
            self.working_dir = Path(self.working_dir) if self.working_dir.strip() else None

    @property
    def resolved_working_dir(self) -> Path:
        """Return the configured working directory or the portable default."""

        return self.working_dir or default_work_dir()

    @classmethod
    def from_mapping(cls, document: Mapping[str, Any]) -> "Config":
        """Build a configuration from a parsed TOML document.

        Raises:
            ConfigValidationError: If a section is malformed.
        """
        storage_section = document.get("storage", {})
        database_section = document.get("database", {})
        if not isinstance(storage_section, Mapping):
            raise ConfigValidationError("[storage] must be a table of named services")
        if not isinstance(database_section, Mapping):
            raise ConfigValidationError("[database] must be a table of named connections")

        storage = {
            name: _parse_storage(name, values) for name, values in storage_section.items()
        }
        databases = {
            name: _parse_database(name, values) for name, values in database_section.items()
        }

        return cls(
            log_file=document.get("log_file"),
            working_dir=document.get("working_dir"),
            storage=storage,
            databases=databases,
        )

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            path: Explicit configuration file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        config_file = path or default_config_path()

        # If config is already loaded from the same file, return cached instance
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            write_text_file(config_file, _TEMPLATE)
            logger.info("Created default configuration at %s", config_file)

        try:
            with open(config_file, "rb") as f:
                document = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(f"Failed to parse {config_file}: {e}") from e

        instance = cls.from_mapping(document)
        logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


def _parse_storage(name: str, values: Any) -> StorageSettings:
    if not isinstance(values, Mapping):
        raise ConfigValidationError(f"[storage.{name}] must be a table")
    storage_type = str(values.get("type", "")).strip().lower()
    if not storage_type:
        raise ConfigValidationError(f"[storage.{name}] is missing 'type'")
    return StorageSettings(name=name, type=storage_type, root=str(values.get("root", "")))


def _parse_database(name: str, values: Any) -> DatabaseSettings:
    if not isinstance(values, Mapping):
        raise ConfigValidationError(f"[database.{name}] must be a table")
    database_type = str(values.get("type", "")).strip().lower()
    if not database_type:
        raise ConfigValidationError(f"[database.{name}] is missing 'type'")

    port = values.get("port")
    if port is not None and not isinstance(port, int):
        raise ConfigValidationError(f"[database.{name}] port must be an integer")

    return DatabaseSettings(
        name=name,
        type=database_type,
        host=str(values.get("host", "localhost")),
        port=port,
        user=str(values.get("user", "")),
        password=str(values.get("pass", "")),
        database=str(values.get("database", "")),
    )


__all__ = [
    "Config",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "DatabaseSettings",
    "StorageSettings",
]
