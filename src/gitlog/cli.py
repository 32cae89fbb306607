"""Command-line interface for gitlog."""

from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gitlog.errors import GitLogError, NoRepositoryFoundError
from gitlog.extraction import RepositoryAccessor, build_tag_index
from gitlog.filters import build_filters
from gitlog.generator import ChangeLogGenerator
from gitlog.logging_config import configure_logging
from gitlog.models import GeneratorConfig, Settings
from gitlog.renderers import FileRenderer, create_renderers

app = typer.Typer(
    name="gitlog",
    help="Generate changelog reports from Git commit history",
    add_completion=False,
)
console = Console()

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


def _setup_logging(settings: Settings, verbose: bool, json_logs: bool) -> None:
    level = "DEBUG" if verbose else settings.log_level
    configure_logging(level, json_format=json_logs or settings.log_json)


def _not_a_repository(path: Optional[Path]) -> None:
    where = path or Path.cwd()
    console.print(f"[bold red]Error:[/bold red] not inside a Git repository: {escape(str(where))}")
    console.print("[dim]Run gitlog from a repository checkout or pass its path.[/dim]")


@app.command()
def generate(
    repo_path: Optional[Path] = typer.Argument(None, help="Directory inside the Git repository (default: cwd)"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Report title"),
    since: Optional[datetime] = typer.Option(
        None, "--since", "-s", formats=DATE_FORMATS, help="Only include commits after this date"
    ),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Directory to write reports to"),
    formats: List[str] = typer.Option(["plain"], "--format", "-f", help="Report format: plain, markdown, json"),
    skip_tags: bool = typer.Option(False, "--skip-tags", help="Do not show tags"),
    no_merges: bool = typer.Option(False, "--no-merges", help="Leave merge commits out"),
    exclude_message: List[str] = typer.Option(
        [], "--exclude-message", "-x", help="Regex; commits whose message matches are left out"
    ),
    author: List[str] = typer.Option([], "--author", "-a", help="Only include commits by this author"),
    exclude_author: List[str] = typer.Option([], "--exclude-author", help="Leave out commits by this author"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Log as JSON lines"),
) -> None:
    """Write a changelog for the history reachable from HEAD."""
    settings = Settings()
    _setup_logging(settings, verbose, json_logs)

    try:
        config = GeneratorConfig(
            report_title=title or settings.report_title,
            include_commits_after=since,
            skip_tags=skip_tags or settings.skip_tags,
            exclude_merge_commits=no_merges,
            exclude_message_patterns=exclude_message,
            include_authors=author,
            exclude_authors=exclude_author,
            output_directory=output_dir or settings.output_directory,
            formats=formats,
        )
        filters = build_filters(config)
    except (ValidationError, ValueError) as e:
        console.print(f"[bold red]Invalid options:[/bold red] {escape(str(e))}")
        raise typer.Exit(2)

    renderers = create_renderers(config.formats, config.output_directory)
    generator = ChangeLogGenerator(renderers, filters=filters, skip_tags=config.skip_tags)

    try:
        generator.open_repository(repo_path)
        console.print(f"[bold green]Generating changelog:[/bold green] {config.report_title}")
        generator.generate(config.report_title, config.include_commits_after)
    except NoRepositoryFoundError:
        _not_a_repository(repo_path)
        raise typer.Exit(1)
    except GitLogError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    for renderer in renderers:
        if isinstance(renderer, FileRenderer):
            console.print(f"[bold green]✓[/bold green] Wrote {renderer.path}")


@app.command()
def tags(
    repo_path: Optional[Path] = typer.Argument(None, help="Directory inside the Git repository (default: cwd)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """List annotated tags and the commits they point at."""
    settings = Settings()
    _setup_logging(settings, verbose, False)

    try:
        with RepositoryAccessor.open(repo_path) as accessor:
            tag_index = build_tag_index(accessor)
    except NoRepositoryFoundError:
        _not_a_repository(repo_path)
        raise typer.Exit(1)
    except GitLogError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if not tag_index:
        console.print("[yellow]No annotated tags found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Tag", style="cyan")
    table.add_column("Commit", style="green", width=10)
    table.add_column("Tagger", style="blue")
    table.add_column("Message", style="white")

    for commit_hash, commit_tags in tag_index.items():
        for tag in commit_tags:
            table.add_row(tag.name, commit_hash[:7], tag.tagger_name or "", tag.message.split("\n")[0][:60])

    console.print(table)


if __name__ == "__main__":
    app()
