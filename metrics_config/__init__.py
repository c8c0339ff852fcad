"""
metrics_config -- single public entrypoint for runtime settings.

``get_active_config()`` reads a YAML settings file (default:
``metrics_config/sets/default.yaml``), applies ``METRICS_*`` environment
overrides and returns a frozen ``MetricsConfig``. No other component reads
settings files or environment variables directly.

Failure modes:
    - ``FileNotFoundError`` -- the settings file does not exist.
    - ``yaml.YAMLError`` -- the file is not valid YAML.
    - ``ConfigurationError`` -- a value has the wrong type.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from metrics_config.loader import load_yaml_file, parse_config
from metrics_config.schema import DatabaseConfig, LoggingConfig, MetricsConfig
from metrics_kernel.logging_config import get_logger

_logger = get_logger("config")

_DEFAULT_CONFIG_PATH = Path(__file__).parent / "sets" / "default.yaml"


def get_active_config(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> MetricsConfig:
    """
    Load the active settings.

    Args:
        config_path: Override path to a settings YAML file.
        environ: Environment mapping for overrides. Defaults to os.environ.
    """
    path = config_path or _DEFAULT_CONFIG_PATH
    config = parse_config(
        load_yaml_file(path),
        environ=os.environ if environ is None else environ,
        source_path=path,
    )
    _logger.info(
        "metrics_config_loaded",
        extra={
            "source_path": str(path),
            "dialect": config.database.url.split(":", 1)[0],
            "log_level": config.logging.level,
        },
    )
    return config


__all__ = [
    "DatabaseConfig",
    "LoggingConfig",
    "MetricsConfig",
    "get_active_config",
]
