"""
Tests for EtlRegistry.
"""
import pytest
from structlog.testing import capture_logs

from etls.core.config import ConfigManager
from etls.core.exceptions import ConfigurationError, ConfigurationMissingError
from etls.etl.registry import EtlRegistry, EtlRegistryEntry


def test_preserves_insertion_order():
    registry = EtlRegistry({"Zeta": "Z", "Alpha": "A", "Middle": "M"})
    assert registry.names() == ["Zeta", "Alpha", "Middle"]
    assert [e.logical_name for e in registry] == ["Zeta", "Alpha", "Middle"]


def test_entries_and_lookup(sample_registry):
    assert len(sample_registry) == 3
    assert "MyCoolEtl" in sample_registry
    assert "Unknown" not in sample_registry
    assert sample_registry.get("MyCoolEtl") == EtlRegistryEntry(
        "MyCoolEtl", "App\\Etls\\MyCoolEtl"
    )
    assert sample_registry.get("Unknown") is None
    assert sample_registry.entries()[0].class_name == "App\\Etls\\MyCoolEtl"


def test_get_or_raise(sample_registry):
    assert sample_registry.get_or_raise("CustomerSync").class_name == "App\\Etls\\CustomerSync"
    with pytest.raises(ConfigurationError) as exc_info:
        sample_registry.get_or_raise("Unknown")
    assert exc_info.value.details["available"] == sample_registry.names()


def test_empty_registry():
    registry = EtlRegistry()
    assert len(registry) == 0
    assert registry.entries() == []


def test_is_not_affected_by_source_mutation():
    source = {"A": "a"}
    registry = EtlRegistry(source)
    source["B"] = "b"
    assert registry.names() == ["A"]


class TestFromConfig:

    def test_loads_in_config_order(self, config_manager):
        registry = EtlRegistry.from_config(config_manager)
        assert registry.names() == ["MyCoolEtl", "CustomerSync", "legacy_import"]
        assert registry.get("legacy_import").class_name == "App\\Etls\\LegacyImport"

    def test_logs_loaded_event(self, config_manager):
        with capture_logs() as logs:
            EtlRegistry.from_config(config_manager)
        events = [log for log in logs if log["event"] == "etl_registry_loaded"]
        assert events and events[0]["total"] == 3

    def test_custom_key(self, write_config):
        path = write_config("jobs.yaml", "nightly:\n  classes:\n    Foo: Bar\n")
        manager = ConfigManager(config_dir=path.parent, load_system_env=False)
        registry = EtlRegistry.from_config(manager, key="jobs.nightly.classes")
        assert registry.get("Foo") == EtlRegistryEntry("Foo", "Bar")

    def test_empty_mapping_is_valid(self, write_config):
        path = write_config("etls.yaml", "etl_classes: {}\n")
        manager = ConfigManager(config_dir=path.parent, load_system_env=False)
        assert len(EtlRegistry.from_config(manager)) == 0

    def test_missing_file(self, tmp_path):
        manager = ConfigManager(config_dir=tmp_path, load_system_env=False)
        with pytest.raises(ConfigurationMissingError):
            EtlRegistry.from_config(manager)

    def test_missing_key(self, write_config):
        path = write_config("etls.yaml", "something_else: 1\n")
        manager = ConfigManager(config_dir=path.parent, load_system_env=False)
        with pytest.raises(ConfigurationMissingError) as exc_info:
            EtlRegistry.from_config(manager)
        assert exc_info.value.key == "etls.etl_classes"

    @pytest.mark.parametrize("value", ["null", "[A, B]", "just-a-string", "3"])
    def test_non_mapping_value(self, write_config, value):
        path = write_config("etls.yaml", f"etl_classes: {value}\n")
        manager = ConfigManager(config_dir=path.parent, load_system_env=False)
        with pytest.raises(ConfigurationMissingError):
            EtlRegistry.from_config(manager)

    def test_non_string_class_is_invalid(self, write_config):
        path = write_config("etls.yaml", "etl_classes:\n  MyCoolEtl: 3\n")
        manager = ConfigManager(config_dir=path.parent, load_system_env=False)
        with pytest.raises(ConfigurationError) as exc_info:
            EtlRegistry.from_config(manager)
        assert not isinstance(exc_info.value, ConfigurationMissingError)

    def test_blank_name_is_invalid(self, write_config):
        path = write_config("etls.yaml", "etl_classes:\n  \" \": App\\Etls\\Blank\n")
        manager = ConfigManager(config_dir=path.parent, load_system_env=False)
        with pytest.raises(ConfigurationError):
            EtlRegistry.from_config(manager)
