"""
Main CLI entry point for tubelist.
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from pathlib import Path
from collections.abc import Coroutine
from typing import Any, Optional, TypeVar

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tubelist.config.logging_config import setup_logging
from tubelist.config.settings import settings
from tubelist.exceptions import (
    EXIT_CODE_GENERAL_ERROR,
    EXIT_CODE_INTERRUPTED,
    EXIT_CODE_INVALID_QUERY,
    EXIT_CODE_NETWORK_ERROR,
    EXIT_CODE_PLAYLIST_ERROR,
    EXIT_CODE_SUCCESS,
    InvalidQueryError,
    NetworkError,
    TubelistError,
)
from tubelist.models.playlist import PlaylistResult
from tubelist.models.request_options import RequestOptions
from tubelist.services.playlist.discovery import DEFAULT_MAX_PLAYLISTS, find_playlists
from tubelist.services.playlist.orchestrator import PlaylistClient
from tubelist.services.playlist.resolver import is_valid_playlist_query

console = Console()

T = TypeVar("T")

app = typer.Typer(
    name="tubelist",
    help="YouTube playlist metadata scraper",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _configure_logging(verbose: bool, log_file: bool) -> Path | None:
    """
    Attach CLI log handlers.

    Parameters
    ----------
    verbose : bool
        Force DEBUG level. The ``debug`` setting has the same effect.
    log_file : bool
        Also write records to ``<logs_dir>/tubelist-{timestamp}.log``.

    Returns
    -------
    Path | None
        The log file path, if one was requested.
    """
    path = None
    if log_file:
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        path = settings.logs_dir / f"tubelist-{timestamp}.log"
    setup_logging(settings.log_level, log_file=path, verbose=verbose or settings.debug)
    if path is not None:
        console.print(f"[dim]Logging to: {path}[/dim]")
    return path


def _exit_code_for(error: TubelistError) -> int:
    if isinstance(error, InvalidQueryError):
        return EXIT_CODE_INVALID_QUERY
    if isinstance(error, NetworkError):
        return EXIT_CODE_NETWORK_ERROR
    return EXIT_CODE_PLAYLIST_ERROR


def _run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine, mapping tubelist errors to exit codes."""
    try:
        return asyncio.run(coro)
    except TubelistError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(code=_exit_code_for(e))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(code=EXIT_CODE_INTERRUPTED)


def _print_playlist(result: PlaylistResult) -> None:
    console.print(
        Panel(
            f"[bold]{result.title}[/bold]\n"
            f"ID: [cyan]{result.id}[/cyan]\n"
            f"URL: {result.url}\n"
            f"Items: {result.total_items}  Views: {result.views}",
            title="Playlist",
            border_style="blue",
        )
    )

    table = Table(title=f"Items (showing {len(result.items)} of {result.total_items})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Video ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Author", style="green")
    table.add_column("Duration", justify="right")

    for index, item in enumerate(result.items, start=1):
        duration = "LIVE" if item.is_live else (item.duration or "-")
        table.add_row(str(index), item.id, item.title, item.author.name, duration)

    console.print(table)


@app.command()
def playlist(
    query: str = typer.Argument(..., help="Playlist URL or ID, channel ID, or channel link"),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-l",
        help="Maximum number of items to fetch (default: all)",
    ),
    gl: Optional[str] = typer.Option(None, "--gl", help="Country override (e.g. DE)"),
    hl: Optional[str] = typer.Option(None, "--hl", help="Language override (e.g. de)"),
    utc_offset: Optional[int] = typer.Option(
        None, "--utc-offset", help="UTC offset in minutes sent to YouTube"
    ),
    retries: int = typer.Option(
        settings.retry_attempts,
        "--retries",
        "-r",
        min=0,
        help="Retry budget for unparseable responses",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    log_file: bool = typer.Option(
        False, "--log-file", help="Also write logs to a timestamped file in the logs directory"
    ),
) -> None:
    """
    Fetch a playlist's metadata and items.

    Examples:
        tubelist playlist PLRBp0Fe2GpgmsW46rJyudVFlY6IYjFBIK
        tubelist playlist "https://www.youtube.com/playlist?list=PL..." --limit 50
        tubelist playlist https://www.youtube.com/c/SomeChannel --json
    """
    _configure_logging(verbose, log_file)
    options = RequestOptions(
        limit=limit if limit is not None else float("inf"),
        gl=gl,
        hl=hl,
        utc_offset_minutes=utc_offset,
    )

    client = PlaylistClient()
    result = _run(client.search(query, options, retries))

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        _print_playlist(result)


@app.command()
def resolve(
    query: str = typer.Argument(..., help="Playlist URL or ID, channel ID, or channel link"),
) -> None:
    """Resolve a query to its canonical playlist ID."""
    client = PlaylistClient()
    list_id = _run(client.resolve_playlist_id(query))
    typer.echo(list_id)


@app.command()
def validate(
    query: str = typer.Argument(..., help="Playlist URL or ID, channel ID, or channel link"),
) -> None:
    """Check whether a query looks like a playlist reference (no network access)."""
    if is_valid_playlist_query(query):
        console.print(f"[green]✓[/green] {query}")
        return
    console.print(f"[red]✗[/red] {query}")
    raise typer.Exit(code=EXIT_CODE_INVALID_QUERY)


@app.command()
def find(
    text: str = typer.Argument(..., help="Free-text search query"),
    max_playlists: int = typer.Option(
        DEFAULT_MAX_PLAYLISTS,
        "--max",
        "-m",
        min=1,
        help="Maximum number of playlists to fetch",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-l",
        help="Maximum number of items to fetch per playlist",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the results as JSON"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    log_file: bool = typer.Option(
        False, "--log-file", help="Also write logs to a timestamped file in the logs directory"
    ),
) -> None:
    """Search YouTube for playlists and fetch each match."""
    _configure_logging(verbose, log_file)
    options = RequestOptions(limit=limit if limit is not None else float("inf"))
    client = PlaylistClient()
    results = _run(find_playlists(client, text, options, max_playlists=max_playlists))

    if as_json:
        typer.echo("[" + ",".join(r.model_dump_json() for r in results) + "]")
        return

    table = Table(title=f"Playlists matching '{text}'")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Items", justify="right", style="green")
    table.add_column("Views", justify="right")
    for result in results:
        table.add_row(result.id, result.title, str(result.total_items), str(result.views))
    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]{settings.app_name}[/bold blue] v{settings.app_version}",
            title="Version",
            border_style="blue",
        )
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
) -> None:
    """
    tubelist - YouTube playlist metadata scraper.

    Resolve playlist links and fetch playlist metadata and items without
    an API key.
    """
    if version:
        console.print(f"{settings.app_name} v{settings.app_version}")
        raise typer.Exit(code=EXIT_CODE_SUCCESS)

    if ctx.invoked_subcommand is None:
        console.print(
            "[yellow]Use 'tubelist --help' for available commands[/yellow]"
        )
        raise typer.Exit(code=EXIT_CODE_GENERAL_ERROR)


if __name__ == "__main__":
    app()
