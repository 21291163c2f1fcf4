"""
Skill manager for Skillport.

Provides the main interface for working with skills: the catalog, skill
details, installed state and installation. Nothing is cached between calls;
every method reads the filesystem afresh.
"""

from pathlib import Path
from typing import Any

from skillport.config import Config, get_config
from skillport.skills.catalog import build_catalog, filter_skills, get_skill_detail
from skillport.skills.installer import install_skill, resolve_installed
from skillport.skills.models import (
    Destination,
    InstalledSkills,
    SkillCatalog,
    SkillDetail,
    SkillRecord,
)
from skillport.storage.paths import PROJECT_SKILLS_SUBPATH, get_project_skills_dir


class SkillManager:
    """Main interface for working with skills.

    Provides methods to:
    - List and search the skills repository
    - Show a skill's details
    - List skills installed globally or in a project
    - Install a skill into either destination
    """

    def __init__(self, repo_path: Path, global_path: Path):
        """Initialize the skill manager.

        Args:
            repo_path: Skills repository root (the catalog).
            global_path: Global install directory.
        """
        self.repo_path = Path(repo_path)
        self.global_path = Path(global_path)

    @classmethod
    def from_config(cls, config: Config) -> "SkillManager":
        """Create a manager from loaded configuration."""
        return cls(
            repo_path=config.skills.get_repo_path(),
            global_path=config.skills.get_global_path(),
        )

    def list_catalog(self) -> SkillCatalog:
        """List every skill in the repository.

        Raises:
            ScanError: If the repository cannot be created or listed.
        """
        return build_catalog(self.repo_path)

    def search(self, query: str = "", category: str | None = None) -> list[SkillRecord]:
        """Search the repository by text and category.

        Args:
            query: Case-insensitive text matched against name, description,
                category and tags.
            category: Exact category, or None / "all".

        Returns:
            Matching skill records.
        """
        return filter_skills(self.list_catalog().records, query=query, category=category)

    def get_skill_detail(self, skill_id: str) -> SkillDetail:
        """Get a repository skill's details.

        Raises:
            NotFoundError: If the skill is not in the repository.
        """
        return get_skill_detail(self.repo_path, skill_id)

    def list_installed(self, project_path: str | Path | None = None) -> InstalledSkills:
        """List installed skills.

        Args:
            project_path: Optional project root.

        Returns:
            Skills installed globally and in the project.
        """
        return resolve_installed(self.global_path, project_path)

    def is_installed(
        self,
        skill_id: str,
        destination: Destination | str,
        project_path: str | Path | None = None,
    ) -> bool:
        """Check whether a skill is installed at a destination."""
        return self.list_installed(project_path).is_installed(skill_id, destination)

    def install_skill(
        self,
        skill_id: str,
        destination: Destination | str,
        project_path: str | Path | None = None,
    ) -> Path:
        """Install a repository skill.

        Args:
            skill_id: Skill id (bundle directory name).
            destination: "global" or "project".
            project_path: Project root, required for project installs.

        Returns:
            Path to the installed skill.

        Raises:
            ValidationError: If inputs are missing or invalid.
            NotFoundError: If the skill is not in the repository.
            InstallError: If copying fails.
        """
        return install_skill(
            self.repo_path,
            skill_id,
            destination,
            self.global_path,
            project_path,
        )

    def destinations(self, project_path: str | Path | None = None) -> list[dict[str, Any]]:
        """Describe the install destinations.

        Args:
            project_path: Optional project root to show the full project path.

        Returns:
            One entry per destination with id, name and path.
        """
        project_skills = Path(*PROJECT_SKILLS_SUBPATH)
        if project_path:
            project_skills = get_project_skills_dir(project_path)

        return [
            {"id": Destination.GLOBAL.value, "name": "Global (OpenCode)", "path": str(self.global_path)},
            {"id": Destination.PROJECT.value, "name": "Project", "path": str(project_skills)},
        ]


def get_skill_manager(config: Config | None = None) -> SkillManager:
    """Create a skill manager from configuration.

    Args:
        config: Configuration to use. Defaults to the loaded configuration.

    Returns:
        SkillManager instance.
    """
    return SkillManager.from_config(config or get_config())
