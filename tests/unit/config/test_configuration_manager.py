"""Tests for configuration loading."""
import json

import pytest
import yaml

from gof_patterns.config import (
    AppConfig,
    ConfigurationManager,
    LoggingConfig,
    OutputConfig,
    get_config_manager,
    validate_config,
)
from gof_patterns.config.defaults import LogDestination, OutputFormat
from gof_patterns.exceptions import ConfigurationError


def test_defaults_without_file():
    config = ConfigurationManager().app_config

    assert config.logging.level == "WARNING"
    assert config.logging.destination == LogDestination.STDOUT
    assert config.output.format == OutputFormat.TABLE
    assert config.environment == "development"


def test_yaml_file_overrides_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"logging": {"level": "debug"}, "output": {"format": "json"}}))

    config = ConfigurationManager(str(path)).app_config

    assert config.logging.level == "DEBUG"
    assert config.logging.backup_count == 5
    assert config.output.format == OutputFormat.JSON


def test_json_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"environment": "testing"}))

    assert ConfigurationManager(str(path)).app_config.environment == "testing"


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"output": {"format": "json"}}))
    monkeypatch.setenv("GOF_OUTPUT_FORMAT", "yaml")
    monkeypatch.setenv("GOF_LOG_LEVEL", "ERROR")

    config = ConfigurationManager(str(path)).app_config

    assert config.output.format == OutputFormat.YAML
    assert config.logging.level == "ERROR"


def test_missing_file_raises():
    with pytest.raises(ConfigurationError, match="not found"):
        ConfigurationManager("/nonexistent/config.yaml").app_config


def test_malformed_file_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    with pytest.raises(ConfigurationError, match="Failed to read"):
        ConfigurationManager(str(path)).app_config


def test_non_mapping_file_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n")

    with pytest.raises(ConfigurationError, match="must contain a mapping"):
        ConfigurationManager(str(path)).app_config


def test_invalid_value_raises_with_field_names(monkeypatch):
    monkeypatch.setenv("GOF_LOG_LEVEL", "LOUD")

    with pytest.raises(ConfigurationError) as exc_info:
        ConfigurationManager().app_config

    assert "logging.level" in exc_info.value.missing_fields


def test_get_typed_returns_sections():
    manager = ConfigurationManager()

    assert isinstance(manager.get_typed(AppConfig), AppConfig)
    assert manager.get_typed(LoggingConfig) is manager.app_config.logging
    assert isinstance(manager.get_typed(OutputConfig), OutputConfig)


def test_get_typed_unknown_type_raises():
    with pytest.raises(ConfigurationError):
        ConfigurationManager().get_typed(dict)


def test_get_config_manager_is_shared_until_new_file(tmp_path):
    first = get_config_manager()
    assert get_config_manager() is first

    path = tmp_path / "config.json"
    path.write_text("{}")
    assert get_config_manager(str(path)) is not first


def test_validate_config_rejects_unknown_environment():
    with pytest.raises(ValueError):
        validate_config({"environment": "moon"})


def test_non_utf8_file_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_bytes(b"output:\n  format: \xff\xfe json\n")

    with pytest.raises(ConfigurationError, match="Failed to read"):
        ConfigurationManager(str(path)).app_config


@pytest.mark.parametrize("section", [None, 5])
def test_override_into_non_mapping_section_raises(tmp_path, monkeypatch, section):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"logging": section}))
    monkeypatch.setenv("GOF_LOG_LEVEL", "DEBUG")

    with pytest.raises(ConfigurationError, match="must be a mapping") as exc_info:
        ConfigurationManager(str(path)).app_config

    assert exc_info.value.missing_fields == ["logging"]
