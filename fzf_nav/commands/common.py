from __future__ import annotations

import json
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from fzf_nav.config import FzfNavConfig, load_config
from fzf_nav.errors import PickerError, PruneError, StoreError
from fzf_nav.store import HistoryStore

MAX_LIMIT = 2**31 - 1


def store_from_path(db_path: str | None) -> HistoryStore:
    return HistoryStore(db_path)


def err_console() -> Console:
    return Console(stderr=True, soft_wrap=True, highlight=False)


def print_error(message: str) -> None:
    err_console().print(message)


def load_config_or_exit() -> FzfNavConfig:
    try:
        return load_config()
    except ValueError as exc:
        print_error(f"[red]Invalid config file:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def parse_limit(raw: str | None, default: int) -> int:
    """Parse a positional limit; anything non-numeric falls back to ``default``.

    Values too large for a 32-bit integer are treated as non-numeric too.
    """
    if raw is None:
        return default
    try:
        limit = int(raw.strip())
    except ValueError:
        return default
    if limit > MAX_LIMIT:
        return default
    if limit <= 0:
        raise typer.BadParameter(f"limit must be a positive integer, got {limit}")
    return limit


def print_json(payload: Any, *, color: bool) -> None:
    if color and sys.stdout.isatty():
        Console(soft_wrap=True).print_json(data=payload, indent=2)
        return
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@contextmanager
def exit_on_error() -> Iterator[None]:
    try:
        yield
    except PruneError as exc:
        print_error(f"[red]Prune failed, no rows were removed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    except StoreError as exc:
        print_error(f"[red]Database error:[/red] {escape(str(exc))}")
        print_error(f"Make sure the database exists at: {escape(str(exc.db_path))}")
        raise typer.Exit(code=1) from exc
    except PickerError as exc:
        print_error(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
