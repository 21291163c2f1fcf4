"""
Skill models for Skillport.

Defines the records produced by catalog scans and install lookups. Every
model is built fresh per request and never written back to disk.
"""

from collections import Counter
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Fallback category, always listed last.
DEFAULT_CATEGORY = "Other"
DEFAULT_DESCRIPTION = "No description available"


class Destination(str, Enum):
    """Where a skill can be installed."""

    GLOBAL = "global"
    PROJECT = "project"


class SkillFrontmatter(BaseModel):
    """Metadata extracted from a SKILL.md frontmatter block.

    Every field falls back to its default when the block is missing or the
    key cannot be recovered.
    """

    name: str = Field(default="", description="Display name")
    description: str = Field(default="", description="Short description")
    category: str = Field(default=DEFAULT_CATEGORY, description="Category")
    tags: list[str] = Field(default_factory=list, description="Tags in written order")


class SkillRecord(BaseModel):
    """A skill bundle found in a scanned root."""

    id: str = Field(..., description="Bundle directory name")
    name: str = Field(..., description="Display name (defaults to id)")
    description: str = Field(default=DEFAULT_DESCRIPTION, description="Short description")
    category: str = Field(default=DEFAULT_CATEGORY, description="Category")
    tags: list[str] = Field(default_factory=list, description="Tags")
    path: Path = Field(..., description="Absolute path to the bundle directory")

    @classmethod
    def from_directory(cls, path: Path) -> "SkillRecord":
        """Create a record carrying only directory-derived defaults."""
        return cls(id=path.name, name=path.name, path=path)

    def apply_frontmatter(self, frontmatter: SkillFrontmatter) -> None:
        """Overwrite fields with non-empty frontmatter values."""
        if frontmatter.name:
            self.name = frontmatter.name
        if frontmatter.description:
            self.description = frontmatter.description
        if frontmatter.category:
            self.category = frontmatter.category
        if frontmatter.tags:
            self.tags = list(frontmatter.tags)


class SkillCatalog(BaseModel):
    """Result of a catalog scan."""

    records: list[SkillRecord] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)

    def category_counts(self) -> dict[str, int]:
        """Count records per category, in category order."""
        counts = Counter(record.category for record in self.records)
        return {category: counts[category] for category in self.categories}


class InstalledSkills(BaseModel):
    """Skills found in the global and project destinations."""

    model_config = ConfigDict(populate_by_name=True)

    global_skills: list[SkillRecord] = Field(default_factory=list, alias="global")
    project: list[SkillRecord] = Field(default_factory=list)

    def for_destination(self, destination: Destination | str) -> list[SkillRecord]:
        """Get the records installed at a destination."""
        if Destination(destination) is Destination.GLOBAL:
            return self.global_skills
        return self.project

    def ids(self, destination: Destination | str) -> set[str]:
        """Get the ids installed at a destination."""
        return {record.id for record in self.for_destination(destination)}

    def is_installed(self, skill_id: str, destination: Destination | str) -> bool:
        """Check whether a skill id is installed at a destination."""
        return skill_id in self.ids(destination)


class SkillFile(BaseModel):
    """A top-level entry inside a skill bundle."""

    name: str
    is_directory: bool = False


class SkillDetail(BaseModel):
    """Full view of one skill: metadata, descriptor text and file listing."""

    id: str
    name: str
    description: str = DEFAULT_DESCRIPTION
    content: str = Field(default="", description="Full SKILL.md text")
    files: list[SkillFile] = Field(default_factory=list)
