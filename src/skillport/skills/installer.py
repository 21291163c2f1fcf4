"""
Skill installer for Skillport.

Resolves install destinations, reports which skills are installed where,
and copies bundles from the repository into a destination.
"""

import logging
import shutil
from pathlib import Path

from skillport.skills.catalog import is_safe_skill_id, scan_skills_dir
from skillport.skills.exceptions import InstallError, NotFoundError, ValidationError
from skillport.skills.models import Destination, InstalledSkills
from skillport.storage.paths import expand_user_path, get_project_skills_dir

logger = logging.getLogger(__name__)


def parse_destination(destination: Destination | str | None) -> Destination:
    """Coerce a destination name.

    Raises:
        ValidationError: If the destination is missing or unknown.
    """
    if not destination:
        raise ValidationError("destination is required")
    try:
        return Destination(destination)
    except ValueError:
        raise ValidationError(
            f"Invalid destination: {destination} (use 'global' or 'project')"
        ) from None


def resolve_installed(global_root: Path, project_root: str | Path | None = None) -> InstalledSkills:
    """List the skills installed globally and in a project.

    Neither directory is created. Without a project root the project list is
    empty and nothing is read for it.

    Args:
        global_root: Global skills directory.
        project_root: Project root; skills are read from its .opencode/skill.

    Returns:
        InstalledSkills for both destinations.

    Raises:
        ScanError: If an existing directory cannot be listed.
    """
    installed = InstalledSkills(global_skills=scan_skills_dir(Path(global_root)))

    if project_root:
        installed.project = scan_skills_dir(get_project_skills_dir(project_root))

    return installed


def resolve_destination(
    skill_id: str,
    destination: Destination | str,
    global_root: Path,
    project_path: str | Path | None = None,
) -> Path:
    """Get the directory a skill is installed into.

    Global installs go to <global_root>/<id>; project installs go to
    <project_path>/.opencode/skill/<id>, with ~ expanded.

    Raises:
        ValidationError: If the destination is invalid or a project
            install has no project path.
    """
    destination = parse_destination(destination)

    if destination is Destination.GLOBAL:
        return expand_user_path(global_root) / skill_id

    if not project_path or not str(project_path).strip():
        raise ValidationError("projectPath is required for project destination")
    return get_project_skills_dir(project_path) / skill_id


def install_skill(
    repo_root: Path,
    skill_id: str,
    destination: Destination | str,
    global_root: Path,
    project_path: str | Path | None = None,
) -> Path:
    """Copy a skill bundle from the repository to a destination.

    Existing files at the destination are overwritten; files that exist only
    at the destination are left in place. Whether the skill is already
    installed is not checked.

    Args:
        repo_root: Skills repository root.
        skill_id: Bundle directory name.
        destination: "global" or "project".
        global_root: Global skills directory.
        project_path: Project root, required for project installs.

    Returns:
        Path to the installed skill.

    Raises:
        ValidationError: If inputs are missing or invalid.
        NotFoundError: If the skill is not in the repository.
        InstallError: If copying fails.
    """
    if not skill_id:
        raise ValidationError("skillId is required")

    dest_path = resolve_destination(skill_id, destination, global_root, project_path)

    if not is_safe_skill_id(skill_id):
        raise ValidationError(f"Invalid skill id: {skill_id}")

    source_path = expand_user_path(repo_root) / skill_id
    if not source_path.is_dir():
        raise NotFoundError(skill_id, source_path)

    try:
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copytree(source_path, dest_path, dirs_exist_ok=True)
    except OSError as e:
        raise InstallError(f"Failed to copy skill '{skill_id}': {e}", dest_path) from e

    logger.info(f"Installed skill '{skill_id}' to {dest_path}")
    return dest_path
