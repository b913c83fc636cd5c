"""
Configuration management with Jinja templating and .env integration.

Provides:
- Loading YAML configs with Jinja variable substitution
- Environment variable injection from .env
- Dotted key lookup (``etls.etl_classes`` reads ``etl_classes`` from ``etls.yaml``)
- Type-safe configuration models
"""

import os
from pathlib import Path
from typing import Any, TypeVar

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, ValidationError

from etls.core.exceptions import ConfigurationError, ConfigurationMissingError
from etls.core.logging import get_logger
from etls.core.templating import TemplateEngine

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

CONFIG_SUFFIXES = (".yaml", ".yml")

_MISSING = object()


class ConfigManager:
    """
    Configuration manager with Jinja templating and environment variable support.

    Each YAML file in the config directory is a top-level namespace: the
    first segment of a dotted key names the file, the rest walk into it.

    Usage:
        manager = ConfigManager(
            config_dir=Path("config"),
            env_file=Path(".env"),
        )

        classes = manager.require("etls.etl_classes")
    """

    def __init__(
        self,
        config_dir: Path | None = None,
        env_file: Path | None = None,
        load_system_env: bool = True,
    ) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_dir: Directory containing configuration files.
            env_file: Path to .env file.
            load_system_env: Whether to load system environment variables.
        """
        self._config_dir = config_dir or Path("config")
        self._env_file = env_file

        self._env_vars: dict[str, str] = {}
        self._load_environment_variables(load_system_env)

        self._template_engine = TemplateEngine(self._env_vars)

        # Parsed files keyed by namespace
        self._config_cache: dict[str, dict[str, Any]] = {}

    def _load_environment_variables(self, load_system_env: bool) -> None:
        """Load environment variables from .env and system."""
        if self._env_file and self._env_file.exists():
            self._env_vars.update(
                {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
            )

        # System environment wins over .env
        if load_system_env:
            self._env_vars.update(os.environ)

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory."""
        return self._config_dir

    @property
    def env_vars(self) -> dict[str, str]:
        """Get loaded environment variables (copy)."""
        return self._env_vars.copy()

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for direct access."""
        return self._template_engine

    def get_env(self, key: str, default: str | None = None) -> str | None:
        """
        Get an environment variable.

        Args:
            key: Environment variable name.
            default: Default value if not found.

        Returns:
            The environment variable value or default.
        """
        return self._env_vars.get(key, default)

    def require_env(self, key: str) -> str:
        """
        Get a required environment variable.

        Raises:
            ConfigurationError: If variable not found.
        """
        value = self._env_vars.get(key)
        if value is None:
            raise ConfigurationError(
                f"Required environment variable not found: {key}",
                details={"variable": key},
            )
        return value

    def load_yaml(
        self,
        file_path: Path | str,
        render_template: bool = True,
        extra_context: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Load a YAML file with optional Jinja rendering.

        Args:
            file_path: Path to the YAML file (relative to config_dir or absolute).
            render_template: Whether to render Jinja variables.
            extra_context: Additional context for rendering.

        Returns:
            Parsed YAML content as dictionary.

        Raises:
            ConfigurationError: If file not found or parsing fails.
        """
        path = self._resolve_path(file_path)

        try:
            content = path.read_text(encoding="utf-8")

            if render_template:
                content = self._template_engine.render_string(content, extra_context)

            data = yaml.safe_load(content)

        except FileNotFoundError as e:
            raise ConfigurationError(
                f"Configuration file not found: {path}",
                config_path=str(path),
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Failed to parse YAML: {e}",
                config_path=str(path),
            ) from e
        except Exception as e:
            raise ConfigurationError(
                f"Failed to load configuration: {e}",
                config_path=str(path),
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {path}",
                config_path=str(path),
                details={"type": type(data).__name__},
            )
        return data

    def load_config(
        self,
        file_path: Path | str,
        model: type[T],
        extra_context: dict[str, Any] | None = None,
    ) -> T:
        """
        Load a YAML config file and parse into a Pydantic model.

        Raises:
            ConfigurationError: If file not found, parsing, or validation fails.
        """
        data = self.load_yaml(file_path, render_template=True, extra_context=extra_context)

        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Failed to validate configuration: {e}",
                config_path=str(file_path),
                details={"model": model.__name__},
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a dotted configuration key.

        Args:
            key: Dotted key, e.g. ``etls.etl_classes``.
            default: Returned when the file or any segment is missing.

        Returns:
            The configured value, or default.
        """
        value = self._lookup(key)
        return default if value is _MISSING else value

    def require(self, key: str) -> Any:
        """
        Look up a dotted configuration key that must exist.

        Raises:
            ConfigurationMissingError: If the file or key is absent.
        """
        value = self._lookup(key)
        if value is _MISSING:
            namespace = key.split(".", 1)[0]
            path = self._find_namespace_file(namespace)
            raise ConfigurationMissingError(
                f"Configuration key not found: {key}",
                key=key,
                config_path=str(path) if path else None,
            )
        return value

    def has(self, key: str) -> bool:
        """Check whether a dotted configuration key is present."""
        return self._lookup(key) is not _MISSING

    def clear_cache(self) -> None:
        """Clear all cached configuration files."""
        self._config_cache.clear()

    def _lookup(self, key: str) -> Any:
        if not key:
            raise ValueError("Configuration key cannot be empty")

        namespace, *segments = key.split(".")
        data = self._load_namespace(namespace)
        if data is None:
            return _MISSING

        value: Any = data
        for segment in segments:
            if not isinstance(value, dict) or segment not in value:
                return _MISSING
            value = value[segment]
        return value

    def _load_namespace(self, namespace: str) -> dict[str, Any] | None:
        if namespace in self._config_cache:
            return self._config_cache[namespace]

        path = self._find_namespace_file(namespace)
        if path is None:
            logger.debug("config_namespace_not_found", namespace=namespace)
            return None

        data = self.load_yaml(path)
        self._config_cache[namespace] = data
        logger.debug("config_namespace_loaded", namespace=namespace, path=str(path))
        return data

    def _find_namespace_file(self, namespace: str) -> Path | None:
        for suffix in CONFIG_SUFFIXES:
            path = self._config_dir / f"{namespace}{suffix}"
            if path.is_file():
                return path
        return None

    def _resolve_path(self, file_path: Path | str) -> Path:
        """Resolve a path relative to the config directory when it exists there."""
        path = Path(file_path)

        if path.is_absolute():
            return path

        config_path = self._config_dir / path
        if config_path.exists():
            return config_path

        return path
