from __future__ import annotations

from collections.abc import Sequence

import typer
from rich.markup import escape

from fzf_nav.selection import PathKind, select_from_history

from .common import exit_on_error, print_error

_KIND_LABELS = {"directory": ("directories", "directory"), "file": ("files", "file")}


def change_to_cmd(
    *,
    store_from_path,
    db_path: str | None,
    kind: PathKind,
    limit: int,
    picker_command: Sequence[str],
) -> None:
    """Pick a recent path interactively and print it for the calling shell."""

    plural, singular = _KIND_LABELS[kind]
    store = store_from_path(db_path)
    with exit_on_error():
        outcome = select_from_history(store, kind, limit, picker_command=picker_command)

    if outcome.status == "no_history":
        print_error(f"No recent {plural} found in history")
        return
    if outcome.status == "no_candidates":
        print_error(f"No valid {plural} found in history")
        return
    if outcome.status == "cancelled":
        raise typer.Exit(code=1)
    if outcome.status == "empty":
        return
    if outcome.status == "stale":
        print_error(f"Selected {singular} no longer exists: {escape(outcome.path or '')}")
        raise typer.Exit(code=1)
    typer.echo(outcome.path)
