"""
Skill exceptions for Skillport.

Defines the errors raised while scanning, reading and installing skills.
"""

from pathlib import Path


class SkillError(Exception):
    """Base exception for skill errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(f"{message}" + (f" (at {path})" if path else ""))


class ScanError(SkillError):
    """A skills root could not be created or listed."""

    pass


class DescriptorParseError(SkillError):
    """A SKILL.md descriptor could not be read."""

    pass


class NotFoundError(SkillError):
    """Skill not found in the repository."""

    def __init__(self, skill_id: str, path: Path | None = None):
        self.skill_id = skill_id
        super().__init__(f"Skill not found: {skill_id}", path)


class ValidationError(SkillError):
    """Required input is missing or invalid."""

    pass


class InstallError(SkillError):
    """Copying a skill to its destination failed."""

    pass
