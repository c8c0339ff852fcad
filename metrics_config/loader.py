"""
Configuration loader (``metrics_config.loader``).

Responsibility
--------------
Loads a YAML settings file and parses it into ``metrics_config.schema``
dataclasses. Runtime callers go through ``metrics_config.get_active_config()``.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Wrong value types  -> ``ConfigurationError``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from metrics_config.schema import DatabaseConfig, LoggingConfig, MetricsConfig
from metrics_kernel.exceptions import ConfigurationError

_LOG_LEVELS = frozenset(logging.getLevelNamesMapping())

ENV_DATABASE_URL = "METRICS_DATABASE_URL"
ENV_LOG_LEVEL = "METRICS_LOG_LEVEL"


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ConfigurationError: if the top level is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("<root>", f"expected a mapping, got {type(data).__name__}")
    return data


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(key, "expected a mapping")
    return value


def _int(section: Mapping[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError(key, f"expected a non-negative integer, got {value!r}")
    return value


def _bool(section: Mapping[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigurationError(key, f"expected true or false, got {value!r}")
    return value


def parse_log_level(value: Any) -> str:
    level = str(value).upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError("logging.level", f"unknown level {value!r}")
    return level


def parse_config(
    data: Mapping[str, Any],
    environ: Mapping[str, str] | None = None,
    source_path: Path | None = None,
) -> MetricsConfig:
    """
    Build a ``MetricsConfig`` from parsed YAML, then apply env overrides.

    ``METRICS_DATABASE_URL`` replaces ``database.url`` and
    ``METRICS_LOG_LEVEL`` replaces ``logging.level``.
    """
    environ = environ or {}
    db = _section(data, "database")
    log = _section(data, "logging")

    url = environ.get(ENV_DATABASE_URL) or db.get("url") or DatabaseConfig.url
    if not isinstance(url, str):
        raise ConfigurationError("database.url", "expected a string")

    return MetricsConfig(
        database=DatabaseConfig(
            url=url,
            echo=_bool(db, "echo", DatabaseConfig.echo),
            pool_size=_int(db, "pool_size", DatabaseConfig.pool_size),
            max_overflow=_int(db, "max_overflow", DatabaseConfig.max_overflow),
        ),
        logging=LoggingConfig(
            level=parse_log_level(environ.get(ENV_LOG_LEVEL) or log.get("level", LoggingConfig.level)),
        ),
        source_path=str(source_path) if source_path else None,
    )
