"""Configuration loading for the MMS core: ``config.yaml`` overlaid with environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .logging_config import log

DEFAULT_CONFIG_PATH = "config.yaml"
DEFAULT_PLATFORM_VERSION = 26


def load_config(path: str | Path | None = None) -> Dict[str, Any]:
    """Build configuration from a YAML file overlaid with environment variables.

    Args:
        path: Config file location. Defaults to ``config.yaml`` in the working
            directory; a missing file yields an empty base mapping.

    Returns:
        dict: Configuration map derived from the file and environment variables.
    """
    cfg_path = Path(path) if path is not None else Path(DEFAULT_CONFIG_PATH)
    cfg: Dict[str, Any] = {}

    try:
        if cfg_path.exists():
            with cfg_path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
            if not isinstance(data, dict):
                log.warning("Config file %s does not contain a mapping", cfg_path)
            else:
                cfg.update(data)
    except (OSError, yaml.YAMLError) as exc:
        log.warning("Failed to load config from %s: %s", cfg_path, exc)

    # Environment variables override config.yaml values
    platform_version = os.getenv("MMS_PLATFORM_VERSION")
    if platform_version:
        _writable_section(cfg, "compat")["platform_version"] = platform_version

    timeout_ms = os.getenv("MMS_OPERATION_TIMEOUT_MS")
    if timeout_ms:
        _writable_section(cfg, "compat")["operation_timeout_ms"] = timeout_ms

    log_level = os.getenv("LOG_LEVEL")
    if log_level:
        _writable_section(cfg, "logging")["level"] = log_level

    log.info("Configuration loaded: %s", _mask_sensitive(cfg))
    return cfg


def platform_version(cfg: Dict[str, Any]) -> int:
    """Return the configured platform-version ordinal, or the default."""
    raw = _section(cfg, "compat").get("platform_version")
    if raw is None:
        return DEFAULT_PLATFORM_VERSION
    try:
        return int(raw)
    except (TypeError, ValueError):
        log.warning("Ignoring non-numeric compat.platform_version %r", raw)
        return DEFAULT_PLATFORM_VERSION


def operation_timeout_override(cfg: Dict[str, Any]) -> Optional[int]:
    """Return the configured MMS operation timeout in milliseconds, if any."""
    raw = _section(cfg, "compat").get("operation_timeout_ms")
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        log.warning("Ignoring non-numeric compat.operation_timeout_ms %r", raw)
        return None


def log_level(cfg: Dict[str, Any]) -> Optional[str]:
    level = _section(cfg, "logging").get("level")
    return str(level) if level is not None else None


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = cfg.get(name)
    return section if isinstance(section, dict) else {}


def _writable_section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    # An empty "compat:" key loads as None
    section = cfg.get(name)
    if not isinstance(section, dict):
        section = cfg[name] = {}
    return section


def _mask_sensitive(data):
    """Return a copy of config data with sensitive values masked."""
    if isinstance(data, dict):
        return {k: _mask_sensitive_value(k, v) for k, v in data.items()}
    if isinstance(data, list):
        return [_mask_sensitive(item) for item in data]
    return data


def _mask_sensitive_value(key: str, value):
    """Mask secret-looking values; leave others unchanged."""
    if isinstance(value, dict):
        return _mask_sensitive(value)
    if isinstance(value, list):
        return [_mask_sensitive_value(key, item) for item in value]
    if isinstance(value, str) and _is_sensitive_key(key):
        if len(value) <= 6:
            return f"{value[:1]}***{value[-1:]}"
        return f"{value[:3]}***{value[-3:]}"
    return value


def _is_sensitive_key(key: str) -> bool:
    """Return True if the key name indicates sensitive content."""
    key_lower = str(key).lower()
    return any(token in key_lower for token in ("password", "secret", "token", "key"))
