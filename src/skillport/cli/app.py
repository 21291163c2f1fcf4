"""
Main Typer application for skillport CLI.

This module defines the root CLI application and registers all command groups.
"""

from typing import Annotated

import typer
from rich.markup import escape

from skillport import __version__
from skillport.cli.commands import config, skill
from skillport.cli.output import print_error, print_info, print_warning
from skillport.config import Config, ConfigurationError, clear_config_cache, get_config
from skillport.logging_setup import configure_logging

# Create the main Typer app
app = typer.Typer(
    name="skillport",
    help="Browse a local repository of skills and install them globally or into a project.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"skillport version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Enable debug logging.",
        ),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Log level (DEBUG, INFO, WARNING, ERROR).",
        ),
    ] = None,
) -> None:
    """
    [bold blue]skillport[/bold blue] - skill catalog and installer

    Skills live in a repository directory, one bundle per folder with a
    SKILL.md descriptor. Install them globally or into a project's
    [bold].opencode/skill[/bold] directory.
    """
    try:
        settings = get_config(reload=True)
    except ConfigurationError as e:
        # config commands stay usable with a broken config file
        if ctx.invoked_subcommand != "config":
            print_error(str(e))
            raise typer.Exit(1)
        print_warning(escape(str(e)))
        clear_config_cache()
        settings = Config()

    level = "DEBUG" if verbose else (log_level or settings.logging.level)
    try:
        configure_logging(level, show_path=settings.logging.show_path)
    except ValueError as e:
        print_error(f"Invalid log level: {e}")
        raise typer.Exit(1)


# Register command groups
app.add_typer(skill.app, name="skill")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
