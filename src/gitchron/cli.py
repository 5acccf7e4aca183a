"""Command-line interface for gitchron."""

from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from gitchron.exceptions import GitChronError
from gitchron.log import configure_logging
from gitchron.models import ReportConfig
from gitchron.presenter import FORMATS
from gitchron.report import generate_report
from gitchron.timerange import parse_time_range

app = typer.Typer(
    name="gitchron",
    help="Chronological commit report across local repositories and all their branches",
    add_completion=False,
)
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        from gitchron import __version__

        typer.echo(f"gitchron version {__version__}")
        raise typer.Exit()


@app.command()
def report(
    repositories: Optional[List[str]] = typer.Argument(None, help="Paths to Git repositories"),
    repository: Optional[List[str]] = typer.Option(
        None, "--repository", "-r", help="Path to a Git repository (repeatable)"
    ),
    since: Optional[str] = typer.Option(None, "--since", "-s", help="Earliest commit date (RFC 3339 or YYYY-MM-DD)"),
    until: Optional[str] = typer.Option(None, "--until", "-u", help="Latest commit date, inclusive (RFC 3339 or YYYY-MM-DD)"),
    output_format: str = typer.Option("flat", "--format", "-f", help=f"Output layout: {' or '.join(FORMATS)}"),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Only commits whose author contains this text"),
    jobs: int = typer.Option(1, "--jobs", "-j", min=1, help="Repositories to walk in parallel"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Print commits from every local branch of the given repositories, oldest first."""
    configure_logging(verbose)

    paths = list(repositories or []) + list(repository or [])
    if not paths:
        raise typer.BadParameter("at least one repository is required", param_hint="REPOSITORIES")

    try:
        config = ReportConfig(
            repositories=paths,
            time_range=parse_time_range(since, until),
            author=author,
            output_format=output_format,
            jobs=jobs,
        )
        output = generate_report(config)
    except (GitChronError, ValidationError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    typer.echo(output, nl=False)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
