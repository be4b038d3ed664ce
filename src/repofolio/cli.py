"""repofolio CLI - static portfolio generator."""

import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import settings
from .exceptions import PortfolioError
from .models import Project
from .site.filters import FilterState, build_view
from .utils.console import console
from .utils.logging import setup_logging
from .validation.models import BuildInput

logger = logging.getLogger(__name__)


def _validate_input(model_class: type, **kwargs: Any) -> Any:
    """Validate input using Pydantic model, exit on validation error.

    Raises:
        typer.Exit: If validation fails (exits with code 1)
    """
    try:
        return model_class(**kwargs)
    except PydanticValidationError as e:
        console.print(f"[red]Validation error: {e.errors()[0]['msg']}[/red]")
        raise typer.Exit(code=1)


def _print_panel(message: str, style: str = "blue") -> None:
    """Print a styled panel message."""
    console.print(Panel(f"[bold]{message}[/bold]", style=style))


def _configure_logging(verbose: bool) -> None:
    setup_logging(level=settings.log_level, log_file=settings.log_file, verbose=verbose)
    if not settings.has_github_token:
        logger.info("GITHUB_TOKEN not set, using the unauthenticated GitHub rate limit")


app = typer.Typer(
    name="repofolio",
    help="Portfolio Generator - build a static portfolio site from GitHub repositories",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]repofolio[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """repofolio - your repositories, one static page."""


@app.command("build")
def build(
    user: Annotated[
        str | None,
        typer.Option("--user", "-u", help="GitHub username (default from GITHUB_USERNAME)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output directory for the static export"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Show progress logs")] = False,
) -> None:
    """Build the static portfolio site from a user's GitHub repositories."""
    from .services import BuildService

    params = _validate_input(
        BuildInput,
        username=user or settings.github_username,
        output_dir=output,
    )
    _configure_logging(verbose)

    _print_panel(f"Building portfolio for {params.username}...")
    try:
        result = BuildService().build(params.username, params.output_dir)
    except PortfolioError as e:
        console.print(f"[red]✗ Build failed: {e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"  Projects: {result.project_count}")
    console.print(f"  Technologies: {len(result.technologies)}")
    if result.degraded:
        console.print(
            f"  [yellow]Without README metadata: {len(result.degraded)} "
            f"({', '.join(result.degraded)})[/yellow]"
        )
    console.print(f"  [green]✓ Saved:[/green] {result.index_path}")
    console.print(f"  [green]✓ Saved:[/green] {result.data_path}")


def _projects_table(title: str, projects: list[Project]) -> Table:
    table = Table(title=title)
    table.add_column("Title", style="bold")
    table.add_column("Technologies")
    table.add_column("Links", style="dim")
    for project in projects:
        table.add_row(project.title, ", ".join(project.technologies), "\n".join(project.links))
    return table


@app.command("projects")
def projects(
    user: Annotated[
        str | None,
        typer.Option("--user", "-u", help="GitHub username (default from GITHUB_USERNAME)"),
    ] = None,
    tech: Annotated[
        list[str] | None,
        typer.Option("--tech", "-t", help="Technology filter (repeatable, OR-matched)"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Show progress logs")] = False,
) -> None:
    """List projects, split by technology filter, without writing files."""
    from .gatherers.projects import projects_from_results
    from .services import BuildService

    params = _validate_input(BuildInput, username=user or settings.github_username)
    _configure_logging(verbose)

    try:
        results = BuildService().collect(params.username)
    except PortfolioError as e:
        console.print(f"[red]✗ Failed: {e}[/red]")
        raise typer.Exit(code=1)

    project_list = projects_from_results(results)
    view = build_view(project_list, FilterState(set(tech or [])))

    counts = ", ".join(f"{name} ({view.counts[name]})" for name in view.technologies)
    console.print(f"[bold]Technologies:[/bold] {counts or 'none'}")
    if view.filter_active:
        console.print(_projects_table(f"Filtered Projects ({len(view.filtered)})", view.filtered))
    console.print(_projects_table(f"{view.others_heading} ({len(view.others)})", view.others))


if __name__ == "__main__":
    app()
