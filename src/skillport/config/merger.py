"""
Configuration merger for Skillport.

Implements deep merge and dotted-path access on configuration dictionaries.
"""

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Merge rules:
    - Scalar values: override replaces base
    - Dicts: recursive deep merge
    - Lists: override replaces base
    - null/None value: remove key from result

    Args:
        base: Base configuration dictionary.
        override: Override configuration dictionary.

    Returns:
        Merged configuration dictionary.

    Examples:
        >>> base = {"skills": {"repo_path": "~/a", "global_path": "~/g"}}
        >>> override = {"skills": {"repo_path": "~/b"}}
        >>> deep_merge(base, override)
        {"skills": {"repo_path": "~/b", "global_path": "~/g"}}
    """
    result = base.copy()

    for key, value in override.items():
        if value is None:
            result.pop(key, None)

        elif isinstance(value, dict) and key in result and isinstance(result[key], dict):
            result[key] = deep_merge(result[key], value)

        else:
            result[key] = value

    return result


def get_nested_value(config: dict[str, Any], key_path: str) -> Any:
    """
    Get a nested value from a configuration dictionary.

    Args:
        config: Configuration dictionary.
        key_path: Dot-separated key path (e.g., "skills.repo_path").

    Returns:
        The value at the key path, or None if not found.
    """
    current = config

    for key in key_path.split("."):
        if isinstance(current, dict) and key in current:
            current = current[key]
        else:
            return None

    return current


def set_nested_value(config: dict[str, Any], key_path: str, value: Any) -> dict[str, Any]:
    """
    Set a nested value in a configuration dictionary.

    Creates intermediate dictionaries as needed.

    Args:
        config: Configuration dictionary.
        key_path: Dot-separated key path (e.g., "logging.level").
        value: Value to set.

    Returns:
        Modified configuration dictionary.
    """
    keys = key_path.split(".")
    current = config

    for key in keys[:-1]:
        if key not in current or not isinstance(current[key], dict):
            current[key] = {}
        current = current[key]

    current[keys[-1]] = value
    return config
