"""Settings for the formatting engine.

Values come from three layers, lowest priority first:

1. Model defaults below
2. ``config.yaml`` from the current working directory, else from the source
   checkout, or the file named by ``INSIGHT_FORMAT_CONFIG``
3. Environment variables (a ``.env`` in the same directories is loaded first)

Usage:
    from insight_format.config import get_nested_config, get_settings

    max_depth = get_settings().formatting.max_depth
    level = get_nested_config("logging.level", "INFO")
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from insight_format.errors import ConfigurationError

# Source checkout root; in a wheel install this is just site-packages' parent
PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_FILENAME = "config.yaml"
DEFAULT_CONFIG_PATH = PROJECT_ROOT / CONFIG_FILENAME

CONFIG_PATH_ENV = "INSIGHT_FORMAT_CONFIG"

# env var -> (section, field)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "INSIGHT_FORMAT_MAX_DEPTH": ("formatting", "max_depth"),
    "INSIGHT_FORMAT_LOG_LEVEL": ("logging", "level"),
    "INSIGHT_FORMAT_JSON_LOGS": ("logging", "json_logs"),
}

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class FormattingSettings(BaseModel):
    """Tree-walk limits."""

    max_depth: int = Field(
        256,
        ge=1,
        le=900,
        description="Nesting depth past which subtrees are returned unformatted",
    )


class LoggingSettings(BaseModel):
    """structlog output options."""

    level: LogLevel = Field("INFO", description="Minimum log level")
    json_logs: bool = Field(False, description="Render log lines as JSON")

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class FormatterSettings(BaseModel):
    """Top-level settings model."""

    formatting: FormattingSettings = Field(default_factory=FormattingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_config_file(path: Path) -> dict[str, Any]:
    """Read a YAML settings file. A missing or empty file yields ``{}``."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return data


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    merged = {key: dict(value) if isinstance(value, dict) else value for key, value in data.items()}
    for env_name, (section, field_name) in ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is None or raw == "":
            continue
        target = merged.setdefault(section, {})
        if not isinstance(target, dict):
            raise ConfigurationError(f"Section '{section}' must be a mapping")
        target[field_name] = raw
    return merged


def config_search_dirs() -> list[Path]:
    """Directories searched for ``config.yaml`` and ``.env``, first match wins."""
    dirs = [Path.cwd()]
    if PROJECT_ROOT not in dirs:
        dirs.append(PROJECT_ROOT)
    return dirs


def find_config_file() -> Path | None:
    for directory in config_search_dirs():
        candidate = directory / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def load_settings(config_path: Path | None = None) -> FormatterSettings:
    """Build settings from the config file and environment.

    Raises:
        ConfigurationError: If the file or any override fails validation.
    """
    for directory in config_search_dirs():
        load_dotenv(directory / ".env", override=False)

    if config_path is None:
        env_path = os.getenv(CONFIG_PATH_ENV)
        config_path = Path(env_path).expanduser() if env_path else find_config_file()

    data = load_config_file(config_path) if config_path is not None else {}
    data = _apply_env_overrides(data)
    try:
        return FormatterSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid insight_format settings: {e}") from e


# Singleton instance
_settings: FormatterSettings | None = None


def get_settings() -> FormatterSettings:
    """Get the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings (useful for testing)."""
    global _settings
    _settings = None


def get_nested_config(path: str, default: Any = None) -> Any:
    """Look up a dotted settings path such as ``"formatting.max_depth"``."""
    node: Any = get_settings().model_dump()
    for part in path.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node
