"""Configuration system for Skillport."""

from skillport.config.loader import (
    ConfigurationError,
    apply_env_overrides,
    clear_config_cache,
    get_config,
    load_config,
    load_yaml_file,
    save_yaml_file,
)
from skillport.config.merger import deep_merge, get_nested_value, set_nested_value
from skillport.config.schema import Config, LoggingConfig, SkillsConfig

__all__ = [
    "Config",
    "ConfigurationError",
    "LoggingConfig",
    "SkillsConfig",
    "apply_env_overrides",
    "clear_config_cache",
    "deep_merge",
    "get_config",
    "get_nested_value",
    "load_config",
    "load_yaml_file",
    "save_yaml_file",
    "set_nested_value",
]
