"""
ETL registry: the ordered mapping of logical ETL names to class identifiers.

Provides:
- Building the registry from configuration or in-memory data
- Ordered, read-only access to entries
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterator

from pydantic import ValidationError

from etls.core.config import ConfigManager
from etls.core.exceptions import ConfigurationError, ConfigurationMissingError
from etls.core.logging import get_logger
from etls.etl.config import EtlsConfig

logger = get_logger(__name__)

DEFAULT_CONFIG_KEY = "etls.etl_classes"


@dataclass(frozen=True)
class EtlRegistryEntry:
    """A single registered ETL."""

    logical_name: str
    class_name: str


class EtlRegistry:
    """
    Ordered registry of ETL classes.

    Entries keep the order they were configured in. The registry is never
    mutated after construction.

    Usage:
        registry = EtlRegistry.from_config(ConfigManager(config_dir=Path("config")))

        for entry in registry:
            print(entry.logical_name, entry.class_name)
    """

    def __init__(self, classes: Mapping[str, str] | None = None) -> None:
        """
        Initialize the registry.

        Args:
            classes: Mapping of logical ETL name to class identifier.
        """
        self._entries: dict[str, EtlRegistryEntry] = {
            name: EtlRegistryEntry(name, class_name)
            for name, class_name in (classes or {}).items()
        }

    @classmethod
    def from_config(
        cls,
        config_manager: ConfigManager,
        key: str = DEFAULT_CONFIG_KEY,
    ) -> "EtlRegistry":
        """
        Build the registry from a configuration key.

        Args:
            config_manager: Configuration manager to read from.
            key: Dotted key holding the name to class mapping.

        Returns:
            Populated registry (possibly empty).

        Raises:
            ConfigurationMissingError: If the key is absent or not a mapping.
            ConfigurationError: If the mapping is not strings to strings.
        """
        value = config_manager.require(key)

        if not isinstance(value, Mapping):
            raise ConfigurationMissingError(
                f"Configuration key {key} must be a mapping of ETL names to classes",
                key=key,
                details={"type": type(value).__name__},
            )

        try:
            config = EtlsConfig.model_validate({"etl_classes": dict(value)})
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid ETL class configuration at {key}: {e}",
                details={"key": key},
            ) from e

        registry = cls(config.etl_classes)

        logger.debug(
            "etl_registry_loaded",
            key=key,
            total=len(registry),
            etls=registry.names(),
        )

        return registry

    def entries(self) -> list[EtlRegistryEntry]:
        """Get all entries in configuration order."""
        return list(self._entries.values())

    def names(self) -> list[str]:
        """Get all logical ETL names in configuration order."""
        return list(self._entries.keys())

    def get(self, logical_name: str) -> EtlRegistryEntry | None:
        """Get an entry by logical name, or None."""
        return self._entries.get(logical_name)

    def get_or_raise(self, logical_name: str) -> EtlRegistryEntry:
        """
        Get an entry by logical name, raising if not found.

        Raises:
            ConfigurationError: If the ETL is not registered.
        """
        entry = self.get(logical_name)
        if entry is None:
            raise ConfigurationError(
                f"ETL not found: {logical_name}",
                details={"available": self.names()},
            )
        return entry

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, logical_name: object) -> bool:
        return logical_name in self._entries

    def __iter__(self) -> Iterator[EtlRegistryEntry]:
        return iter(self._entries.values())
