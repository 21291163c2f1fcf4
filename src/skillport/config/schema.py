"""
Pydantic configuration schema for Skillport.

This module defines all configuration models with validation.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from skillport.storage.paths import (
    expand_user_path,
    get_default_global_skills_path,
    get_default_repo_path,
)

# =============================================================================
# Skills Configuration
# =============================================================================


class SkillsConfig(BaseModel):
    """Skills repository and install destination configuration."""

    model_config = ConfigDict(extra="allow")

    repo_path: str = Field(default_factory=lambda: str(get_default_repo_path()))
    global_path: str = Field(default_factory=lambda: str(get_default_global_skills_path()))

    def get_repo_path(self) -> Path:
        """Get the repository root with ~ expanded."""
        return expand_user_path(self.repo_path)

    def get_global_path(self) -> Path:
        """Get the global install directory with ~ expanded."""
        return expand_user_path(self.global_path)


# =============================================================================
# Logging Configuration
# =============================================================================


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="allow")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    show_path: bool = False


# =============================================================================
# Root Configuration
# =============================================================================


class Config(BaseModel):
    """
    Root configuration model for Skillport.

    Configuration can be loaded from a YAML file and environment variables,
    merged in order of priority.
    """

    model_config = ConfigDict(extra="allow")

    skills: SkillsConfig = Field(default_factory=SkillsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
