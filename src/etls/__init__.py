"""
etls - List the ETL classes registered in configuration.

This package provides:
- A YAML configuration layer with Jinja templating and .env support
- An ordered registry of ETL names and the classes implementing them
- The ``etls:list`` console command
"""

__version__ = "0.1.0"

from etls.commands.list_command import ListCommand, list_etls
from etls.core.config import ConfigManager
from etls.core.strings import kebab_case
from etls.etl.registry import EtlRegistry, EtlRegistryEntry

__all__ = [
    "ConfigManager",
    "EtlRegistry",
    "EtlRegistryEntry",
    "ListCommand",
    "kebab_case",
    "list_etls",
    "__version__",
]
