"""Configuration loading for Registrar."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from registrar.exceptions import RegistrarError

CONFIG_FILENAME = "registrar.yaml"


class ConfigError(RegistrarError):
    """Raised when configuration or seed data is invalid or missing."""


@dataclass
class DatabaseConfig:
    """Database settings. The default keeps all state in process memory."""

    path: str = ":memory:"


@dataclass
class LoggingConfig:
    """Logging settings passed to setup_logging."""

    dir: str = "logs"
    file: str = "registrar.log"
    level: str = "INFO"
    console: bool = True
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5


@dataclass
class ApiConfig:
    """REST API bind address."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class Settings:
    """Registrar configuration.

    Values come from defaults, then an optional registrar.yaml, then
    REGISTRAR_* environment variables.
    """

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    seed_default_catalog: bool = True
    seed_file: str | None = None
    root_path: Path = field(default_factory=Path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], root_path: Path) -> Settings:
        """Create settings from a dictionary.

        Args:
            data: Configuration dictionary from YAML.
            root_path: Directory containing the config file.

        Returns:
            Parsed settings.

        Raises:
            ConfigError: If a section has the wrong shape or type.
        """
        for section in ("database", "logging", "api"):
            if not isinstance(data.get(section, {}), dict):
                raise ConfigError(f"Section '{section}' must be a mapping")

        database_data = data.get("database", {})
        logging_data = data.get("logging", {})
        api_data = data.get("api", {})

        port = _int_setting(api_data, "api", "port", 8000)
        max_bytes = _int_setting(logging_data, "logging", "max_bytes", 10 * 1024 * 1024)
        backup_count = _int_setting(logging_data, "logging", "backup_count", 5)

        return cls(
            database=DatabaseConfig(path=str(database_data.get("path", ":memory:"))),
            logging=LoggingConfig(
                dir=str(logging_data.get("dir", "logs")),
                file=str(logging_data.get("file", "registrar.log")),
                level=str(logging_data.get("level", "INFO")),
                console=bool(logging_data.get("console", True)),
                max_bytes=max_bytes,
                backup_count=backup_count,
            ),
            api=ApiConfig(host=str(api_data.get("host", "127.0.0.1")), port=port),
            seed_default_catalog=bool(data.get("seed_default_catalog", True)),
            seed_file=data.get("seed_file"),
            root_path=root_path,
        )

    def apply_env(self, environ: dict[str, str] | None = None) -> Settings:
        """Override settings from REGISTRAR_* environment variables.

        Args:
            environ: Environment mapping. Defaults to os.environ.

        Returns:
            self, for chaining.
        """
        env = os.environ if environ is None else environ
        if "REGISTRAR_DB_PATH" in env:
            self.database.path = env["REGISTRAR_DB_PATH"]
        if "REGISTRAR_LOG_DIR" in env:
            self.logging.dir = env["REGISTRAR_LOG_DIR"]
        if "REGISTRAR_LOG_FILE" in env:
            self.logging.file = env["REGISTRAR_LOG_FILE"]
        if "REGISTRAR_LOG_LEVEL" in env:
            self.logging.level = env["REGISTRAR_LOG_LEVEL"]
        return self

    def get_log_path(self) -> Path:
        """Log file path. A relative log dir is resolved against the config directory."""
        log_dir = Path(self.logging.dir)
        if not log_dir.is_absolute():
            log_dir = self.root_path / log_dir
        return log_dir / self.logging.file

    def get_seed_path(self) -> Path | None:
        """Absolute path to the seed file, resolved against the config directory."""
        if not self.seed_file:
            return None
        return self.root_path / self.seed_file


def _int_setting(section: dict[str, Any], name: str, key: str, default: int) -> int:
    try:
        return int(section.get(key, default))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid {name}.{key}: {section.get(key)!r}") from e


def read_yaml_mapping(path: Path | str) -> dict[str, Any]:
    """Read a YAML file that must contain a mapping.

    Raises:
        ConfigError: If the file is missing, unparsable or not a mapping.
    """
    path = Path(path)

    if not path.exists():
        raise ConfigError(f"File not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a YAML mapping, got {type(data).__name__}")

    return data


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from a YAML file and the environment.

    Args:
        config_path: Path to registrar.yaml. When None, defaults are used.

    Returns:
        Parsed settings with environment overrides applied.

    Raises:
        ConfigError: If the file doesn't exist or is invalid.
    """
    if config_path is None:
        return Settings().apply_env()

    config_path = Path(config_path)
    data = read_yaml_mapping(config_path)
    return Settings.from_dict(data, config_path.parent).apply_env()


def find_config(start_path: Path | str | None = None) -> Path | None:
    """Find registrar.yaml by walking up the directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to registrar.yaml, or None if there is none.
    """
    start = Path.cwd() if start_path is None else Path(start_path)

    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.exists():
            return candidate

    return None
