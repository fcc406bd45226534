from __future__ import annotations

import logging
from dataclasses import dataclass

import typer

from . import __version__
from .commands.common import load_config_or_exit, parse_limit, store_from_path
from .commands.db_cmds import init_db_cmd, prune_cmd
from .commands.query_cmds import (
    file_stats_cmd,
    popular_dirs_cmd,
    recent_dirs_cmd,
    recent_files_cmd,
    search_cmd,
)
from .commands.select_cmds import change_to_cmd
from .config import FzfNavConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

app = typer.Typer(
    help="fzf-nav: query and navigate your directory and file history",
    no_args_is_help=True,
    add_completion=False,
)
db_app = typer.Typer(help="Database maintenance")
app.add_typer(db_app, name="db")


@dataclass
class CliState:
    config: FzfNavConfig
    db_path: str | None
    color: bool


def _state(ctx: typer.Context) -> CliState:
    return ctx.find_root().obj


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    db_path: str = typer.Option(
        None, "--db-path", help="Path to the database file (default: ~/.fzf.db)"
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored JSON output"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging on stderr"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    config = load_config_or_exit()
    ctx.obj = CliState(
        config=config,
        db_path=db_path or config.db_path,
        color=config.color and not no_color,
    )


@app.command("recent-dirs")
def recent_dirs(
    ctx: typer.Context,
    limit: str = typer.Argument(None, help="Number of visits to show (default: 50)"),
) -> None:
    """Show recent directory visits."""
    state = _state(ctx)
    recent_dirs_cmd(
        store_from_path=store_from_path,
        db_path=state.db_path,
        limit=parse_limit(limit, state.config.report_limit),
        color=state.color,
    )


@app.command("recent-files")
def recent_files(
    ctx: typer.Context,
    limit: str = typer.Argument(None, help="Number of file events to show (default: 50)"),
) -> None:
    """Show recent file opens."""
    state = _state(ctx)
    recent_files_cmd(
        store_from_path=store_from_path,
        db_path=state.db_path,
        limit=parse_limit(limit, state.config.report_limit),
        color=state.color,
    )


@app.command("popular-dirs")
def popular_dirs(
    ctx: typer.Context,
    limit: str = typer.Argument(None, help="Number of directories to show (default: 50)"),
) -> None:
    """Show most visited directories."""
    state = _state(ctx)
    popular_dirs_cmd(
        store_from_path=store_from_path,
        db_path=state.db_path,
        limit=parse_limit(limit, state.config.report_limit),
        color=state.color,
    )


@app.command("file-stats")
def file_stats(ctx: typer.Context) -> None:
    """Show file type statistics."""
    state = _state(ctx)
    file_stats_cmd(store_from_path=store_from_path, db_path=state.db_path, color=state.color)


@app.command()
def search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Substring to look for"),
) -> None:
    """Search directory and file history."""
    state = _state(ctx)
    search_cmd(
        store_from_path=store_from_path, db_path=state.db_path, query=query, color=state.color
    )


@app.command("change-to-dir")
def change_to_dir(
    ctx: typer.Context,
    limit: str = typer.Argument(None, help="Number of visits to offer (default: 100)"),
) -> None:
    """Interactive directory selection with fzf."""
    state = _state(ctx)
    change_to_cmd(
        store_from_path=store_from_path,
        db_path=state.db_path,
        kind="directory",
        limit=parse_limit(limit, state.config.select_limit),
        picker_command=state.config.picker_command,
    )


@app.command("change-to-file")
def change_to_file(
    ctx: typer.Context,
    limit: str = typer.Argument(None, help="Number of file events to offer (default: 100)"),
) -> None:
    """Interactive file selection with fzf."""
    state = _state(ctx)
    change_to_cmd(
        store_from_path=store_from_path,
        db_path=state.db_path,
        kind="file",
        limit=parse_limit(limit, state.config.select_limit),
        picker_command=state.config.picker_command,
    )


@app.command("init-db")
def init_db(ctx: typer.Context) -> None:
    """Create the SQLite database (no-op if it already exists)."""
    init_db_cmd(store_from_path=store_from_path, db_path=_state(ctx).db_path)


@db_app.command("prune")
def db_prune(
    ctx: typer.Context,
    dry_run: bool = typer.Option(False, help="Report stale rows without deleting them"),
) -> None:
    """Delete history rows whose path no longer exists (does nothing on failure)."""
    state = _state(ctx)
    prune_cmd(
        store_from_path=store_from_path,
        db_path=state.db_path,
        dry_run=dry_run,
        color=state.color,
    )


def main() -> None:
    app(prog_name="fzf-nav")
