"""
Pytest configuration and fixtures for all tests.
"""
from pathlib import Path

import pytest

from etls.core.config import ConfigManager
from etls.core.logging import reset_logging
from etls.etl.registry import EtlRegistry


ETLS_YAML = """\
etl_classes:
  MyCoolEtl: App\\Etls\\MyCoolEtl
  CustomerSync: App\\Etls\\CustomerSync
  legacy_import: App\\Etls\\LegacyImport
"""


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Undo logging configuration done by CLI tests."""
    yield
    reset_logging()


@pytest.fixture
def write_config(tmp_path):
    """Write a file into a temporary config directory and return its path."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    def _write(name: str, content: str) -> Path:
        path = config_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config_dir(write_config) -> Path:
    """Config directory holding a three-entry etls.yaml."""
    return write_config("etls.yaml", ETLS_YAML).parent


@pytest.fixture
def config_manager(config_dir) -> ConfigManager:
    return ConfigManager(config_dir=config_dir, load_system_env=False)


@pytest.fixture
def sample_registry() -> EtlRegistry:
    return EtlRegistry({
        "MyCoolEtl": "App\\Etls\\MyCoolEtl",
        "CustomerSync": "App\\Etls\\CustomerSync",
        "legacy_import": "App\\Etls\\LegacyImport",
    })
