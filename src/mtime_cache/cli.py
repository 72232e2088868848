"""Click CLI for mtime-cache — inspect and manage a converted-file cache."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from mtime_cache.cache.file_cache import FileCache
from mtime_cache.config.hierarchy import load_config_hierarchy
from mtime_cache.errors.exceptions import FileCacheError
from mtime_cache.types import CacheOptions

console = Console()
error_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _setup_logging(verbosity: int, configured: object = None) -> None:
    """Configure logging based on verbosity level."""
    level = _configured_level(configured)
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


def _configured_level(configured: object) -> int:
    """Map a ``log_level`` config value (name or number) to a level."""
    if isinstance(configured, bool):
        return logging.WARNING
    if isinstance(configured, int):
        return configured
    if isinstance(configured, str):
        level = logging.getLevelName(configured.strip().upper())
        if isinstance(level, int):
            return level
    if configured is not None:
        logger.warning("Ignoring invalid log_level %r", configured)
    return logging.WARNING


def _open_cache(ctx: click.Context) -> FileCache:
    params = ctx.obj
    try:
        return FileCache.init(params["base_dir"], CacheOptions.from_config(params["config"]))
    except FileCacheError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@click.group()
@click.version_option(package_name="mtime-cache")
@click.option(
    "--base-dir",
    type=click.Path(file_okay=False),
    default=".",
    show_default=True,
    help="Project base directory source paths are relative to.",
)
@click.option("--cache-dir", type=click.Path(file_okay=False), default=None, help="Cache directory.")
@click.option("--namespace", type=str, default=None, help="Subdirectory under the cache directory.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
@click.pass_context
def cli(
    ctx: click.Context,
    base_dir: str,
    cache_dir: str | None,
    namespace: str | None,
    verbose: int,
) -> None:
    """mtime-cache — cache converted files until their source changes."""
    config = load_config_hierarchy(cache_dir=cache_dir, namespace=namespace)
    _setup_logging(verbose, config.get("log_level"))
    ctx.obj = {"base_dir": Path(base_dir).resolve(), "config": config}


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show the resolved cache configuration."""
    cache = _open_cache(ctx)

    table = Table(title="Cache Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Project base dir", str(cache.project_base_dir))
    table.add_row("Cache dir", str(cache.options.cache_dir))
    table.add_row("Namespace", cache.options.namespace)
    table.add_row("Storage root", str(cache.storage_root))
    table.add_row("Storage root exists", "yes" if cache.storage_root.exists() else "no")
    table.add_row("Strict paths", "yes" if cache.options.strict_paths else "no")

    console.print(table)


@cli.command()
@click.argument("source", type=click.Path())
@click.pass_context
def locate(ctx: click.Context, source: str) -> None:
    """Print where the entry for SOURCE is stored."""
    cache = _open_cache(ctx)
    try:
        click.echo(str(cache.entry_path(Path(source).resolve())))
    except FileCacheError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--skip-staleness-check",
    is_flag=True,
    default=False,
    help="Return the entry even if the source changed after it was written.",
)
@click.pass_context
def get(ctx: click.Context, source: str, skip_staleness_check: bool) -> None:
    """Print cached content for SOURCE. Exits 1 when there is none."""
    cache = _open_cache(ctx)
    try:
        content = cache.get(Path(source).resolve(), skip_staleness_check=skip_staleness_check)
    except FileCacheError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if content is None:
        error_console.print("[yellow]No fresh cache entry.[/yellow]")
        sys.exit(1)
    click.echo(content, nl=False)


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--from",
    "content_file",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="File holding the converted content (default: stdin).",
)
@click.pass_context
def add(ctx: click.Context, source: str, content_file: TextIO) -> None:
    """Store converted content for SOURCE."""
    cache = _open_cache(ctx)
    content = content_file.read()
    try:
        cache.add_strict(Path(source).resolve(), content)
    except FileCacheError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    console.print(f"[green]Cached {source}[/green]")


@cli.command()
@click.confirmation_option(prompt="Are you sure you want to clear the cache?")
@click.pass_context
def clear(ctx: click.Context) -> None:
    """Delete every cached entry."""
    cache = _open_cache(ctx)
    try:
        cache.clear()
    except FileCacheError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    console.print("[green]Cache cleared.[/green]")


def main() -> None:
    """Entry point for the CLI."""
    cli()
