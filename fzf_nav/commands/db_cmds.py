from __future__ import annotations

from rich import print
from rich.markup import escape

from .common import exit_on_error, print_json


def init_db_cmd(*, store_from_path, db_path: str | None) -> None:
    """Create the SQLite database (no-op if it already exists)."""

    store = store_from_path(db_path)
    with exit_on_error():
        store.initialize()
    print(f"Initialized database at {escape(str(store.db_path))}")


def prune_cmd(*, store_from_path, db_path: str | None, dry_run: bool, color: bool) -> None:
    """Remove history rows whose path no longer exists (all or nothing)."""

    store = store_from_path(db_path)
    with exit_on_error():
        result = store.prune_stale(dry_run=dry_run)
    print_json(result.to_dict(), color=color)
