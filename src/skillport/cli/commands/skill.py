"""
skillport skill - Skill catalog and install commands.

Usage:
    skillport skill list
    skillport skill search review --category Dev
    skillport skill show skill-name
    skillport skill installed --project ~/src/app
    skillport skill install skill-name --to project --project ~/src/app
"""

from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from skillport.cli.output import print_error, print_success, print_warning
from skillport.skills import (
    Destination,
    SkillError,
    SkillRecord,
    filter_skills,
    get_skill_manager,
)

app = typer.Typer(
    name="skill",
    help="Skill catalog and installation.",
)

console = Console()

PREVIEW_CHARS = 500


def _truncate(text: str, limit: int) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def _skills_table(
    title: str,
    skills: list[SkillRecord],
    installed_ids: set[str] | None = None,
    verbose: bool = False,
) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Category", style="magenta")
    table.add_column("Description")

    if installed_ids is not None:
        table.add_column("Installed", style="green")
    if verbose:
        table.add_column("Tags", style="dim")
        table.add_column("Path", style="dim")

    for skill in skills:
        row = [
            escape(skill.id),
            escape(skill.name),
            escape(skill.category),
            escape(_truncate(skill.description, 50)),
        ]
        if installed_ids is not None:
            row.append("✓" if skill.id in installed_ids else "")
        if verbose:
            row.append(escape(", ".join(skill.tags)))
            row.append(escape(str(skill.path)))
        table.add_row(*row)

    return table


@app.command("list")
def list_skills(
    category: Annotated[
        str | None,
        typer.Option(
            "--category",
            "-c",
            help="Only show skills in this category.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show tags and paths.",
        ),
    ] = False,
) -> None:
    """List skills available in the repository."""
    manager = get_skill_manager()

    try:
        catalog = manager.list_catalog()
        installed = manager.list_installed()
    except SkillError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if not catalog.records:
        console.print("[yellow]No skills in the repository.[/yellow]")
        console.print(f"[dim]Add skill folders to: {escape(str(manager.repo_path))}[/dim]")
        return

    skills = filter_skills(catalog.records, category=category)
    console.print(
        _skills_table(
            "Available Skills",
            skills,
            installed_ids=installed.ids(Destination.GLOBAL),
            verbose=verbose,
        )
    )

    counts = ", ".join(f"{name} ({count})" for name, count in catalog.category_counts().items())
    console.print(f"\n[dim]Categories: {counts}[/dim]")
    console.print(f"[dim]Total: {len(skills)} of {len(catalog.records)} skill(s)[/dim]")


@app.command()
def search(
    query: Annotated[
        str,
        typer.Argument(
            help="Text to match against name, description, category and tags.",
        ),
    ],
    category: Annotated[
        str | None,
        typer.Option(
            "--category",
            "-c",
            help="Only search this category.",
        ),
    ] = None,
) -> None:
    """Search the repository."""
    manager = get_skill_manager()

    try:
        results = manager.search(query, category=category)
    except SkillError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if not results:
        console.print(f"[yellow]No skills found matching '{escape(query)}'[/yellow]")
        return

    console.print(_skills_table(f"Search Results for '{escape(query)}'", results))


@app.command()
def show(
    skill_id: Annotated[
        str,
        typer.Argument(
            help="Skill id (folder name).",
        ),
    ],
) -> None:
    """Show skill details."""
    manager = get_skill_manager()

    try:
        detail = manager.get_skill_detail(skill_id)
    except SkillError as e:
        print_error(str(e))
        raise typer.Exit(1)

    lines = [
        f"[bold]ID:[/bold] {escape(detail.id)}",
        f"[bold]Name:[/bold] {escape(detail.name)}",
        f"[bold]Description:[/bold] {escape(detail.description)}",
        "",
        "[bold]Files:[/bold]",
    ]
    for entry in detail.files:
        suffix = "/" if entry.is_directory else ""
        lines.append(f"  {escape(entry.name)}{suffix}")

    console.print(Panel("\n".join(lines), title=f"Skill: {escape(detail.name)}"))

    if detail.content:
        console.print("\n[bold]SKILL.md Preview:[/bold]")
        console.print(_truncate(detail.content, PREVIEW_CHARS), markup=False, style="dim")


@app.command()
def installed(
    project: Annotated[
        str | None,
        typer.Option(
            "--project",
            "-p",
            help="Project root to inspect.",
        ),
    ] = None,
) -> None:
    """List installed skills."""
    manager = get_skill_manager()

    try:
        result = manager.list_installed(project)
    except SkillError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if result.global_skills:
        console.print(_skills_table("Global Skills", result.global_skills))
    else:
        console.print("[yellow]No global skills installed.[/yellow]")

    if not project:
        console.print("[dim]Pass --project to see project skills.[/dim]")
    elif result.project:
        console.print(_skills_table("Project Skills", result.project))
    else:
        console.print("[yellow]No project skills installed.[/yellow]")


@app.command()
def install(
    skill_id: Annotated[
        str,
        typer.Argument(
            help="Skill id (folder name) to install.",
        ),
    ],
    to: Annotated[
        Destination,
        typer.Option(
            "--to",
            "-t",
            help="Install destination.",
            case_sensitive=False,
        ),
    ] = Destination.GLOBAL,
    project: Annotated[
        str | None,
        typer.Option(
            "--project",
            "-p",
            help="Project root (required with --to project).",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Copy again even if already installed.",
        ),
    ] = False,
) -> None:
    """Install a skill from the repository."""
    manager = get_skill_manager()

    try:
        already_installed = (
            not force
            and _can_check_installed(to, project)
            and manager.is_installed(skill_id, to, project)
        )
        if already_installed:
            print_warning(f"Skill '{escape(skill_id)}' is already installed ({to.value}).")
            console.print("[dim]Use --force to copy it again.[/dim]")
            return

        dest_path = manager.install_skill(skill_id, to, project)
    except SkillError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success(f"Skill '{escape(skill_id)}' copied successfully")
    console.print(f"[dim]Location: {escape(str(dest_path))}[/dim]")


def _can_check_installed(destination: Destination, project: str | None) -> bool:
    """Whether the installed-state check can run for this destination."""
    return destination is Destination.GLOBAL or bool(project)
