"""
Skillport Skills System.

A skill is a directory holding a SKILL.md descriptor plus supporting files.
Its frontmatter carries a name, description, category and tags.

Usage:
    from skillport.skills import get_skill_manager

    manager = get_skill_manager()

    # Browse the repository
    catalog = manager.list_catalog()

    # Search it
    results = manager.search("review", category="Dev")

    # Install into a project
    manager.install_skill("code-review", "project", project_path="~/src/app")
"""

# Exceptions
from skillport.skills.exceptions import (
    DescriptorParseError,
    InstallError,
    NotFoundError,
    ScanError,
    SkillError,
    ValidationError,
)

# Models
from skillport.skills.models import (
    DEFAULT_CATEGORY,
    DEFAULT_DESCRIPTION,
    Destination,
    InstalledSkills,
    SkillCatalog,
    SkillDetail,
    SkillFile,
    SkillFrontmatter,
    SkillRecord,
)

# Parser
from skillport.skills.parser import (
    parse_frontmatter,
    parse_skill_md,
    parse_tags,
    split_frontmatter,
    strip_quotes,
)

# Catalog
from skillport.skills.catalog import (
    build_catalog,
    filter_skills,
    get_skill_detail,
    scan_skills_dir,
    sort_categories,
)

# Installer
from skillport.skills.installer import (
    install_skill,
    resolve_destination,
    resolve_installed,
)

# Manager
from skillport.skills.manager import (
    SkillManager,
    get_skill_manager,
)

__all__ = [
    # Exceptions
    "DescriptorParseError",
    "InstallError",
    "NotFoundError",
    "ScanError",
    "SkillError",
    "ValidationError",
    # Models
    "DEFAULT_CATEGORY",
    "DEFAULT_DESCRIPTION",
    "Destination",
    "InstalledSkills",
    "SkillCatalog",
    "SkillDetail",
    "SkillFile",
    "SkillFrontmatter",
    "SkillRecord",
    # Parser
    "parse_frontmatter",
    "parse_skill_md",
    "parse_tags",
    "split_frontmatter",
    "strip_quotes",
    # Catalog
    "build_catalog",
    "filter_skills",
    "get_skill_detail",
    "scan_skills_dir",
    "sort_categories",
    # Installer
    "install_skill",
    "resolve_destination",
    "resolve_installed",
    # Manager
    "SkillManager",
    "get_skill_manager",
]
