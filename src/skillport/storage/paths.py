"""
Path utilities for Skillport.

Provides consistent path resolution for configuration, the skills
repository, and the two install destinations.
"""

import os
from pathlib import Path

# Fixed location of installed skills inside a project.
PROJECT_SKILLS_SUBPATH: tuple[str, ...] = (".opencode", "skill")

# Name of the descriptor file at the top of every bundle.
SKILL_DESCRIPTOR = "SKILL.md"


def get_skillport_home() -> Path:
    """
    Get the Skillport home directory.

    Resolution order:
    1. SKILLPORT_HOME environment variable
    2. Default: ~/.skillport

    Returns:
        Path to the Skillport home directory.
    """
    env_home = os.environ.get("SKILLPORT_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".skillport"


def get_global_config_path() -> Path:
    """
    Get the path to the global configuration file.

    Returns:
        Path to ~/.skillport/config.yaml
    """
    return get_skillport_home() / "config.yaml"


def get_default_repo_path() -> Path:
    """
    Get the default skills repository (the catalog root).

    Returns:
        Path to ~/.skillport/skills_repo/
    """
    return get_skillport_home() / "skills_repo"


def get_default_global_skills_path() -> Path:
    """
    Get the default global install destination.

    Returns:
        Path to ~/.config/opencode/skill/
    """
    return Path.home() / ".config" / "opencode" / "skill"


def expand_user_path(path: str | Path) -> Path:
    """
    Expand a leading ~ and make the path absolute.

    Relative paths are resolved against the current working directory.

    Args:
        path: Path string or Path object.

    Returns:
        Absolute Path.
    """
    return Path(os.path.expanduser(str(path))).resolve()


def get_project_skills_dir(project_root: str | Path) -> Path:
    """
    Get the skills directory inside a project.

    Args:
        project_root: Project root, ~ is expanded.

    Returns:
        Path to <project_root>/.opencode/skill/
    """
    return expand_user_path(project_root).joinpath(*PROJECT_SKILLS_SUBPATH)


def ensure_directory(path: Path, mode: int = 0o755) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path.
        mode: Permission mode for created directories.

    Returns:
        The path (for chaining).
    """
    path.mkdir(parents=True, exist_ok=True, mode=mode)
    return path
