"""
skillport config - Configuration commands.

Usage:
    skillport config show
    skillport config path
    skillport config init
"""

from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from skillport.cli.output import print_error, print_info, print_success, print_table
from skillport.config import Config, ConfigurationError, get_config, save_yaml_file
from skillport.skills import SkillManager
from skillport.storage.paths import get_global_config_path

app = typer.Typer(
    name="config",
    help="Configuration management.",
)

console = Console()


@app.command()
def show(
    project: Annotated[
        str | None,
        typer.Option(
            "--project",
            "-p",
            help="Project root to show the project destination for.",
        ),
    ] = None,
) -> None:
    """Show resolved configuration and install destinations."""
    try:
        config = get_config()
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1)

    manager = SkillManager.from_config(config)

    console.print(
        Syntax(
            yaml.dump(config.model_dump(), default_flow_style=False, sort_keys=False),
            "yaml",
        )
    )
    print_table(
        ["ID", "Name", "Path"],
        [[d["id"], d["name"], escape(d["path"])] for d in manager.destinations(project)],
        title="Destinations",
    )


@app.command()
def path() -> None:
    """Show the config file location."""
    config_path = get_global_config_path()
    status = "exists" if config_path.exists() else "not created"
    console.print(f"{escape(str(config_path))} ({status})")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing config file.",
        ),
    ] = False,
) -> None:
    """Write the current configuration to the config file."""
    config_path = get_global_config_path()

    if config_path.exists() and not force:
        print_info(f"Config already exists: {escape(str(config_path))}")
        console.print("[dim]Use --force to overwrite.[/dim]")
        return

    try:
        settings = get_config()
    except ConfigurationError:
        # --force on an unreadable file writes the defaults
        settings = Config()

    try:
        save_yaml_file(config_path, settings.model_dump())
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success(f"Config written to {escape(str(config_path))}")
