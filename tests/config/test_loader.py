"""Tests for the YAML settings loader and environment overrides."""

from pathlib import Path

import pytest
import yaml

from metrics_config import get_active_config
from metrics_config.loader import (
    ENV_DATABASE_URL,
    ENV_LOG_LEVEL,
    load_yaml_file,
    parse_config,
)
from metrics_config.schema import DEFAULT_DATABASE_URL, MetricsConfig
from metrics_kernel.exceptions import ConfigurationError


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(text)
    return path


class TestLoadYamlFile:
    def test_mapping(self, tmp_path):
        path = _write(tmp_path, "database:\n  url: sqlite://\n")
        assert load_yaml_file(path) == {"database": {"url": "sqlite://"}}

    def test_empty_file_is_empty_mapping(self, tmp_path):
        assert load_yaml_file(_write(tmp_path, "")) == {}

    def test_top_level_list_rejected(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_yaml_file(_write(tmp_path, "- a\n- b\n"))
        assert exc_info.value.key == "<root>"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_yaml_file(tmp_path / "nope.yaml")

    def test_malformed_yaml(self, tmp_path):
        with pytest.raises(yaml.YAMLError):
            load_yaml_file(_write(tmp_path, "database: [unclosed\n"))


class TestParseConfig:
    def test_defaults(self):
        config = parse_config({})
        assert config == MetricsConfig()
        assert config.database.url == DEFAULT_DATABASE_URL
        assert config.logging.level == "INFO"

    def test_values_from_file(self):
        config = parse_config(
            {
                "database": {"url": "sqlite:///m.db", "echo": True, "pool_size": 3, "max_overflow": 0},
                "logging": {"level": "debug"},
            }
        )
        assert config.database.url == "sqlite:///m.db"
        assert config.database.echo is True
        assert config.database.pool_size == 3
        assert config.database.max_overflow == 0
        assert config.logging.level == "DEBUG"

    def test_env_overrides(self):
        config = parse_config(
            {"database": {"url": "sqlite:///file.db"}, "logging": {"level": "INFO"}},
            environ={ENV_DATABASE_URL: "sqlite://", ENV_LOG_LEVEL: "warning"},
        )
        assert config.database.url == "sqlite://"
        assert config.logging.level == "WARNING"

    def test_empty_env_value_does_not_override(self):
        config = parse_config({"database": {"url": "sqlite:///file.db"}}, environ={ENV_DATABASE_URL: ""})
        assert config.database.url == "sqlite:///file.db"

    @pytest.mark.parametrize(
        "data, key",
        [
            ({"database": "sqlite://"}, "database"),
            ({"database": {"pool_size": "ten"}}, "pool_size"),
            ({"database": {"pool_size": -1}}, "pool_size"),
            ({"database": {"max_overflow": True}}, "max_overflow"),
            ({"database": {"echo": "yes"}}, "echo"),
            ({"database": {"url": 5432}}, "database.url"),
            ({"logging": {"level": "LOUD"}}, "logging.level"),
        ],
    )
    def test_bad_values(self, data, key):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_config(data)
        assert exc_info.value.key == key
        assert exc_info.value.code == "CONFIG_ERROR"


class TestGetActiveConfig:
    def test_default_file_loads(self):
        config = get_active_config(environ={})
        assert config.database.url.startswith("postgresql://")
        assert config.source_path.endswith("default.yaml")

    def test_explicit_path_and_env(self, tmp_path):
        path = _write(tmp_path, "database:\n  url: sqlite:///from-file.db\nlogging:\n  level: ERROR\n")
        config = get_active_config(path, environ={ENV_DATABASE_URL: "sqlite://"})
        assert config.database.url == "sqlite://"
        assert config.logging.level == "ERROR"
        assert config.source_path == str(path)

    def test_logs_load(self, tmp_path, captured_logs):
        get_active_config(_write(tmp_path, "database:\n  url: sqlite://\n"), environ={})
        loaded = [r for r in captured_logs() if r["message"] == "metrics_config_loaded"]
        assert loaded[0]["dialect"] == "sqlite"
