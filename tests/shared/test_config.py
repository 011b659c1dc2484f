import logging

import pytest

from mms_shared import config
from mms_shared.logging_config import _coerce_level


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep environment overrides from the developer shell out of the tests."""
    for name in ("MMS_PLATFORM_VERSION", "MMS_OPERATION_TIMEOUT_MS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_load_config_reads_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("compat:\n  platform_version: 23\n  operation_timeout_ms: 150000\nlogging:\n  level: DEBUG\n")

    cfg = config.load_config(path)

    assert config.platform_version(cfg) == 23
    assert config.operation_timeout_override(cfg) == 150_000
    assert config.log_level(cfg) == "DEBUG"


def test_missing_file_yields_defaults(tmp_path):
    cfg = config.load_config(tmp_path / "absent.yaml")

    assert cfg == {}
    assert config.platform_version(cfg) == config.DEFAULT_PLATFORM_VERSION
    assert config.operation_timeout_override(cfg) is None
    assert config.log_level(cfg) is None


def test_invalid_yaml_is_ignored(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("compat: [unclosed\n")

    assert config.load_config(path) == {}


def test_environment_overrides_file(tmp_path, monkeypatch):
    """Environment variables take precedence over config.yaml values."""
    path = tmp_path / "config.yaml"
    path.write_text("compat:\n  platform_version: 19\n")
    monkeypatch.setenv("MMS_PLATFORM_VERSION", "24")
    monkeypatch.setenv("MMS_OPERATION_TIMEOUT_MS", "70000")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    cfg = config.load_config(path)

    assert config.platform_version(cfg) == 24
    assert config.operation_timeout_override(cfg) == 70_000
    assert config.log_level(cfg) == "WARNING"


def test_non_numeric_values_fall_back():
    cfg = {"compat": {"platform_version": "new", "operation_timeout_ms": "soon"}}

    assert config.platform_version(cfg) == config.DEFAULT_PLATFORM_VERSION
    assert config.operation_timeout_override(cfg) is None


def test_sensitive_values_are_masked():
    masked = config._mask_sensitive({"transport": {"api_key": "abcdef123456", "host": "mmsc.example"}})

    assert masked["transport"]["api_key"] == "abc***456"
    assert masked["transport"]["host"] == "mmsc.example"


def test_coerce_level(monkeypatch):
    assert _coerce_level("debug") == logging.DEBUG
    assert _coerce_level(logging.WARNING) == logging.WARNING
    assert _coerce_level("nonsense") == logging.INFO
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    assert _coerce_level(None) == logging.ERROR


def test_environment_overrides_empty_sections(tmp_path, monkeypatch):
    """Empty YAML sections load as None and are replaced by the env overlay."""
    path = tmp_path / "config.yaml"
    path.write_text("compat:\nlogging:\n")
    monkeypatch.setenv("MMS_PLATFORM_VERSION", "21")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    cfg = config.load_config(path)

    assert config.platform_version(cfg) == 21
    assert config.log_level(cfg) == "DEBUG"
