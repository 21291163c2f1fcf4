"""
Pytest configuration and fixtures for skillport tests.
"""

import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from skillport.config import clear_config_cache


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture(autouse=True)
def isolated_env(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep every test away from the real home directory and env overrides."""
    monkeypatch.setenv("SKILLPORT_HOME", str(temp_dir / ".skillport"))
    for var in (
        "SKILLS_REPO_PATH",
        "GLOBAL_SKILLS_PATH",
        "SKILLPORT_SKILLS_REPO_PATH",
        "SKILLPORT_SKILLS_GLOBAL_PATH",
        "SKILLPORT_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)

    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def skills_repo(temp_dir: Path) -> Path:
    """Provide an empty skills repository directory."""
    repo = temp_dir / "skills_repo"
    repo.mkdir()
    return repo


@pytest.fixture
def global_dir(temp_dir: Path) -> Path:
    """Provide a (not yet created) global skills directory."""
    return temp_dir / "global" / "skill"


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Provide an empty project directory."""
    project = temp_dir / "test-project"
    project.mkdir()
    return project


@pytest.fixture
def make_skill() -> Callable[..., Path]:
    """Provide a factory that writes a skill bundle."""

    def _make_skill(
        root: Path,
        skill_id: str,
        skill_md: str | None = None,
        files: dict[str, str] | None = None,
    ) -> Path:
        skill_dir = root / skill_id
        skill_dir.mkdir(parents=True)
        if skill_md is not None:
            (skill_dir / "SKILL.md").write_text(skill_md, encoding="utf-8")
        for rel_path, content in (files or {}).items():
            target = skill_dir / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return skill_dir

    return _make_skill


@pytest.fixture
def sample_skill_md() -> str:
    """Provide sample SKILL.md content."""
    return """---
name: Code Review
description: "Reviews pull requests for common issues"
category: Dev
tags: [review, git, "quality"]
---

# Code Review

Read the diff and report problems.

## Instructions

1. Check tests
2. Check naming
"""
