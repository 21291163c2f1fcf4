"""
Unit tests for CLI commands.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from skillport import __version__
from skillport.cli.app import app
from skillport.config import Config, load_config


@pytest.fixture
def cli_env(
    skills_repo: Path,
    global_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
    make_skill,
    sample_skill_md,
) -> Path:
    """Point the CLI at temporary directories and add two skills."""
    monkeypatch.setenv("SKILLS_REPO_PATH", str(skills_repo))
    monkeypatch.setenv("GLOBAL_SKILLS_PATH", str(global_dir))
    make_skill(skills_repo, "foo", sample_skill_md, files={"helper.py": "pass\n"})
    make_skill(skills_repo, "bar")
    return skills_repo


def test_version(cli_runner: CliRunner) -> None:
    """Test --version flag."""
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help(cli_runner: CliRunner) -> None:
    """Test --help flag."""
    result = cli_runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "skill" in result.output
    assert "config" in result.output


def test_skill_list(cli_runner: CliRunner, cli_env: Path) -> None:
    """Test listing the repository."""
    result = cli_runner.invoke(app, ["skill", "list"])
    assert result.exit_code == 0
    assert "foo" in result.output
    assert "bar" in result.output
    assert "Dev (1)" in result.output
    assert "Other (1)" in result.output


def test_skill_list_category(cli_runner: CliRunner, cli_env: Path) -> None:
    """Test filtering the list by category."""
    result = cli_runner.invoke(app, ["skill", "list", "--category", "Other"])
    assert result.exit_code == 0
    assert "Total: 1 of 2" in result.output


def test_skill_list_empty(cli_runner: CliRunner, temp_dir: Path, monkeypatch) -> None:
    """Test an empty repository is created and reported."""
    repo = temp_dir / "new-repo"
    monkeypatch.setenv("SKILLS_REPO_PATH", str(repo))
    result = cli_runner.invoke(app, ["skill", "list"])
    assert result.exit_code == 0
    assert "No skills in the repository" in result.output
    assert repo.is_dir()


def test_skill_search(cli_runner: CliRunner, cli_env: Path) -> None:
    """Test searching by tag."""
    result = cli_runner.invoke(app, ["skill", "search", "quality"])
    assert result.exit_code == 0
    assert "foo" in result.output
    assert "bar" not in result.output


def test_skill_search_no_results(cli_runner: CliRunner, cli_env: Path) -> None:
    """Test a search with no matches."""
    result = cli_runner.invoke(app, ["skill", "search", "zzz"])
    assert result.exit_code == 0
    assert "No skills found" in result.output


def test_skill_show(cli_runner: CliRunner, cli_env: Path) -> None:
    """Test showing a skill."""
    result = cli_runner.invoke(app, ["skill", "show", "foo"])
    assert result.exit_code == 0
    assert "Code Review" in result.output
    assert "helper.py" in result.output
    assert "Read the diff" in result.output


def test_skill_show_not_found(cli_runner: CliRunner, cli_env: Path) -> None:
    """Test showing a missing skill."""
    result = cli_runner.invoke(app, ["skill", "show", "ghost"])
    assert result.exit_code == 1
    assert "Skill not found: ghost" in result.output


def test_install_global_then_installed(cli_runner: CliRunner, cli_env: Path, global_dir: Path) -> None:
    """Test a global install shows up in the installed listing."""
    result = cli_runner.invoke(app, ["skill", "install", "foo"])
    assert result.exit_code == 0
    assert "copied successfully" in result.output
    assert (global_dir / "foo" / "helper.py").is_file()

    result = cli_runner.invoke(app, ["skill", "installed"])
    assert result.exit_code == 0
    assert "foo" in result.output


def test_install_already_installed(cli_runner: CliRunner, cli_env: Path) -> None:
    """Test reinstalling warns unless forced."""
    cli_runner.invoke(app, ["skill", "install", "foo"])

    result = cli_runner.invoke(app, ["skill", "install", "foo"])
    assert result.exit_code == 0
    assert "already installed" in result.output

    result = cli_runner.invoke(app, ["skill", "install", "foo", "--force"])
    assert result.exit_code == 0
    assert "copied successfully" in result.output


def test_install_project(cli_runner: CliRunner, cli_env: Path, project_dir: Path) -> None:
    """Test a project install."""
    result = cli_runner.invoke(
        app, ["skill", "install", "bar", "--to", "project", "--project", str(project_dir)]
    )
    assert result.exit_code == 0
    assert (project_dir / ".opencode" / "skill" / "bar").is_dir()

    result = cli_runner.invoke(app, ["skill", "installed", "--project", str(project_dir)])
    assert result.exit_code == 0
    assert "Project Skills" in result.output


def test_install_project_without_path(cli_runner: CliRunner, cli_env: Path) -> None:
    """Test a project install without --project fails validation."""
    result = cli_runner.invoke(app, ["skill", "install", "foo", "--to", "project"])
    assert result.exit_code == 1
    assert "projectPath is required" in result.output


def test_install_unknown_skill(cli_runner: CliRunner, cli_env: Path) -> None:
    """Test installing a skill that does not exist."""
    result = cli_runner.invoke(app, ["skill", "install", "ghost"])
    assert result.exit_code == 1
    assert "Skill not found: ghost" in result.output


def test_config_show(cli_runner: CliRunner, cli_env: Path) -> None:
    """Test showing configuration."""
    result = cli_runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0
    assert "repo_path" in result.output
    assert "Destinations" in result.output


def test_config_init_and_path(cli_runner: CliRunner, temp_dir: Path) -> None:
    """Test writing the config file and reporting its location."""
    result = cli_runner.invoke(app, ["config", "init"])
    assert result.exit_code == 0
    assert (temp_dir / ".skillport" / "config.yaml").is_file()

    result = cli_runner.invoke(app, ["config", "path"])
    assert result.exit_code == 0
    assert "exists" in result.output


def test_invalid_config_file(cli_runner: CliRunner, temp_dir: Path) -> None:
    """Test a broken config file is reported, not raised."""
    config_path = temp_dir / ".skillport" / "config.yaml"
    config_path.parent.mkdir(parents=True)
    config_path.write_text("skills: [unclosed")

    result = cli_runner.invoke(app, ["skill", "list"])
    assert result.exit_code == 1
    assert "Invalid YAML" in result.output


def test_config_commands_with_broken_file(cli_runner: CliRunner, temp_dir: Path) -> None:
    """Test a broken config file can still be located and replaced."""
    config_path = temp_dir / ".skillport" / "config.yaml"
    config_path.parent.mkdir(parents=True)
    config_path.write_text("skills: [unclosed")

    result = cli_runner.invoke(app, ["config", "path"])
    assert result.exit_code == 0
    assert "exists" in result.output

    result = cli_runner.invoke(app, ["config", "show"])
    assert result.exit_code == 1
    assert "Invalid YAML" in result.output

    result = cli_runner.invoke(app, ["config", "init", "--force"])
    assert result.exit_code == 0
    assert "Config written" in result.output
    assert load_config().skills.repo_path == Config().skills.repo_path

    result = cli_runner.invoke(app, ["skill", "list"])
    assert result.exit_code == 0
