import json

import pytest
import structlog

from insight_format.config import (
    DEFAULT_CONFIG_PATH,
    PROJECT_ROOT,
    config_search_dirs,
    find_config_file,
    get_nested_config,
    get_settings,
    load_config_file,
    load_settings,
)
from insight_format.errors import ConfigurationError
from insight_format.logging_config import configure_logging


def test_defaults_without_config_file(tmp_path):
    settings = load_settings(tmp_path / "missing.yaml")
    assert settings.formatting.max_depth == 256
    assert settings.logging.level == "INFO"
    assert settings.logging.json_logs is False


def test_project_config_file_loads():
    assert DEFAULT_CONFIG_PATH.name == "config.yaml"
    assert load_settings(DEFAULT_CONFIG_PATH).formatting.max_depth == 256


def test_yaml_values_are_used(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("formatting:\n  max_depth: 12\nlogging:\n  level: WARNING\n")

    settings = load_settings(path)

    assert settings.formatting.max_depth == 12
    assert settings.logging.level == "WARNING"


def test_env_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("formatting:\n  max_depth: 12\n")
    monkeypatch.setenv("INSIGHT_FORMAT_MAX_DEPTH", "7")
    monkeypatch.setenv("INSIGHT_FORMAT_LOG_LEVEL", "debug")
    monkeypatch.setenv("INSIGHT_FORMAT_JSON_LOGS", "true")

    settings = load_settings(path)

    assert settings.formatting.max_depth == 7
    assert settings.logging.level == "DEBUG"
    assert settings.logging.json_logs is True


def test_empty_env_value_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("INSIGHT_FORMAT_MAX_DEPTH", "")
    assert load_settings(tmp_path / "missing.yaml").formatting.max_depth == 256


@pytest.mark.parametrize("raw", ["abc", "0", "100000"])
def test_invalid_max_depth_raises(tmp_path, monkeypatch, raw):
    monkeypatch.setenv("INSIGHT_FORMAT_MAX_DEPTH", raw)
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "missing.yaml")


def test_invalid_log_level_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("INSIGHT_FORMAT_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "missing.yaml")


@pytest.mark.parametrize("content", ["- just\n- a list\n", "formatting: [\n"])
def test_malformed_yaml_raises(tmp_path, content):
    path = tmp_path / "config.yaml"
    path.write_text(content)
    with pytest.raises(ConfigurationError):
        load_config_file(path)


def test_empty_yaml_file_is_empty_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config_file(path) == {}


def test_get_settings_uses_config_env_path(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("formatting:\n  max_depth: 33\n")
    monkeypatch.setenv("INSIGHT_FORMAT_CONFIG", str(path))

    assert get_settings().formatting.max_depth == 33
    assert get_settings() is get_settings()
    assert get_nested_config("formatting.max_depth") == 33


def test_get_nested_config_default():
    assert get_nested_config("logging.level") == "INFO"
    assert get_nested_config("formatting.missing", "fallback") == "fallback"
    assert get_nested_config("formatting.max_depth.deeper", 1) == 1


def test_configure_logging_json_to_stderr(capsys):
    configure_logging(level="DEBUG", json_logs=True)

    structlog.get_logger("test").debug("formatting payload", endpoint="ratios")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "formatting payload"
    assert record["endpoint"] == "ratios"
    assert record["level"] == "debug"


def test_configure_logging_filters_below_level(capsys):
    configure_logging(level="WARNING", json_logs=True)

    structlog.get_logger("test").info("hidden")

    assert capsys.readouterr().err == ""


def test_config_file_in_working_directory_wins(tmp_path, monkeypatch):
    (tmp_path / "config.yaml").write_text("formatting:\n  max_depth: 42\n")
    monkeypatch.chdir(tmp_path)

    assert find_config_file() == tmp_path / "config.yaml"
    assert load_settings().formatting.max_depth == 42


def test_checkout_config_is_the_fallback(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert config_search_dirs() == [tmp_path, PROJECT_ROOT]
    assert find_config_file() == DEFAULT_CONFIG_PATH


def test_no_config_file_anywhere_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("insight_format.config.PROJECT_ROOT", tmp_path)

    assert find_config_file() is None
    assert load_settings().formatting.max_depth == 256


def test_max_depth_ceiling_is_accepted(tmp_path, monkeypatch):
    monkeypatch.setenv("INSIGHT_FORMAT_MAX_DEPTH", "900")
    assert load_settings(tmp_path / "missing.yaml").formatting.max_depth == 900
