"""Grove CLI - Command-line interface for the object store."""

import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from grove import __version__, commands
from grove.config import GlobalConfig
from grove.errors import GroveError
from grove.repo import Repository, init_repository
from grove.util import setup_logging

app = typer.Typer(
    name="grove",
    help="Content-addressed object store and revision resolver",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-error output"),
) -> None:
    """Grove - Inspect and extend a content-addressed object store."""
    setup_logging(verbose=verbose, quiet=quiet)


def fail(error: Exception) -> NoReturn:
    err_console.print(f"[red]Error: {escape(str(error))}[/red]", highlight=False, soft_wrap=True)
    raise typer.Exit(1)


def open_repository(config: GlobalConfig) -> Repository:
    try:
        return Repository.discover(Path.cwd(), config.compression_level)
    except GroveError as e:
        fail(e)


def load_config() -> GlobalConfig:
    try:
        return GlobalConfig.load()
    except ValueError as e:
        fail(e)


@app.command()
def version() -> None:
    """Show Grove version."""
    console.print(f"Grove version {__version__}")


@app.command()
def config() -> None:
    """Show the effective global configuration."""
    try:
        config = GlobalConfig.load_or_create()
    except ValueError as e:
        fail(e)

    table = Table(title="Grove Configuration")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("init.default_branch", config.default_branch)
    table.add_row("core.compression_level", str(config.compression_level))
    table.add_row("log.abbrev", str(config.log_abbrev))

    console.print(table)
    console.print(f"  Location: {config.config_path}")


@app.command()
def init(
    path: Path = typer.Argument(Path("."), help="Repository root directory"),
    branch: Optional[str] = typer.Argument(None, help="Initial branch name"),
) -> None:
    """Initialize an empty repository."""
    config = load_config()
    final_branch = branch or config.default_branch

    init_repository(path, final_branch)

    console.print(f"[green]✓[/green] Initialized repository in {path}")
    console.print(f"  Branch: {final_branch}")


@app.command(name="hash-object")
def hash_object(
    file: Optional[Path] = typer.Argument(None, help="File to hash (defaults to stdin)"),
    write: bool = typer.Option(False, "--write", "-w", help="Write the blob into the object store"),
) -> None:
    """Compute a blob identifier, optionally storing the blob."""
    config = load_config()
    repo = open_repository(config) if write else None

    try:
        data = file.read_bytes() if file else sys.stdin.buffer.read()
        identifier = commands.hash_object(data, repo)
    except (GroveError, OSError) as e:
        fail(e)

    typer.echo(identifier)


@app.command(name="cat-file")
def cat_file(
    rev: str = typer.Argument(..., help="Full or abbreviated object identifier"),
) -> None:
    """Pretty-print the content of an object."""
    repo = open_repository(load_config())

    try:
        output = commands.cat_object(repo, rev)
    except GroveError as e:
        fail(e)

    typer.echo(output, nl=False)


@app.command()
def log(
    rev: str = typer.Argument(..., help="Commit to start from"),
) -> None:
    """Show commit history following first parents."""
    config = load_config()
    repo = open_repository(config)

    try:
        output = commands.log(repo, rev, abbrev=config.log_abbrev)
    except GroveError as e:
        fail(e)

    typer.echo(output, nl=False)


@app.command(name="show-ref")
def show_ref(
    patterns: Optional[list[str]] = typer.Argument(None, help="Only show references matching these patterns"),
) -> None:
    """List references and the identifiers they resolve to."""
    repo = open_repository(load_config())

    try:
        output = commands.show_refs(repo, patterns)
    except GroveError as e:
        fail(e)

    typer.echo(output, nl=False)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
