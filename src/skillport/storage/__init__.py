"""Storage utilities for Skillport."""

from skillport.storage.paths import (
    PROJECT_SKILLS_SUBPATH,
    SKILL_DESCRIPTOR,
    ensure_directory,
    expand_user_path,
    get_default_global_skills_path,
    get_default_repo_path,
    get_global_config_path,
    get_project_skills_dir,
    get_skillport_home,
)

__all__ = [
    "PROJECT_SKILLS_SUBPATH",
    "SKILL_DESCRIPTOR",
    "ensure_directory",
    "expand_user_path",
    "get_default_global_skills_path",
    "get_default_repo_path",
    "get_global_config_path",
    "get_project_skills_dir",
    "get_skillport_home",
]
