"""
ETL module - ETL configuration and registry.
"""

from etls.etl.config import EtlsConfig
from etls.etl.registry import DEFAULT_CONFIG_KEY, EtlRegistry, EtlRegistryEntry

__all__ = [
    "DEFAULT_CONFIG_KEY",
    "EtlsConfig",
    "EtlRegistry",
    "EtlRegistryEntry",
]
