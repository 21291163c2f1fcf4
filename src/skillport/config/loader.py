"""
Configuration loader for Skillport.

Loads and merges configuration from multiple sources:
1. Default values
2. Global config (~/.skillport/config.yaml)
3. Environment variables
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from skillport.config.merger import deep_merge, set_nested_value
from skillport.config.schema import Config
from skillport.storage.paths import get_global_config_path

# Environment variables and the config keys they override.
ENV_OVERRIDES = {
    "SKILLS_REPO_PATH": "skills.repo_path",
    "GLOBAL_SKILLS_PATH": "skills.global_path",
    "SKILLPORT_SKILLS_REPO_PATH": "skills.repo_path",
    "SKILLPORT_SKILLS_GLOBAL_PATH": "skills.global_path",
    "SKILLPORT_LOG_LEVEL": "logging.level",
}


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed configuration dictionary.

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"Config file must be a YAML mapping: {path}")
    return content


def save_yaml_file(path: Path, config: dict[str, Any]) -> None:
    """
    Save a configuration dictionary to a YAML file.

    Args:
        path: Path to the YAML file.
        config: Configuration dictionary to save.

    Raises:
        ConfigurationError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    except OSError as e:
        raise ConfigurationError(f"Cannot write {path}: {e}") from e


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    SKILLS_REPO_PATH and GLOBAL_SKILLS_PATH are honoured as-is; the
    SKILLPORT_* forms take precedence when both are set.

    Args:
        config: Configuration dictionary to modify.

    Returns:
        Configuration with environment overrides applied.
    """
    for env_var, key_path in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if not value:
            continue

        if key_path == "logging.level":
            value = value.upper()

        config = set_nested_value(config, key_path, value)

    return config


def load_config(config_path: Path | None = None, skip_env: bool = False) -> Config:
    """
    Load and merge configuration from all sources.

    Loading order (later overrides earlier):
    1. Default values from Config model
    2. Global config file
    3. Environment variables

    Args:
        config_path: Config file to read. Defaults to ~/.skillport/config.yaml.
        skip_env: Skip environment variable overrides.

    Returns:
        Merged and validated Config object.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    config_dict = Config().model_dump()

    path = config_path or get_global_config_path()
    config_dict = deep_merge(config_dict, load_yaml_file(path))

    if not skip_env:
        config_dict = apply_env_overrides(config_dict)

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


# Singleton for cached config
_cached_config: Config | None = None


def get_config(reload: bool = False) -> Config:
    """
    Get the global configuration instance.

    Uses a cached instance. Use reload=True to force refresh.

    Args:
        reload: Force reload configuration from disk.

    Returns:
        Config instance.
    """
    global _cached_config

    if _cached_config is None or reload:
        _cached_config = load_config()

    return _cached_config


def clear_config_cache() -> None:
    """Clear the cached configuration."""
    global _cached_config
    _cached_config = None
