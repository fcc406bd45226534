from __future__ import annotations

from .common import exit_on_error, print_json


def recent_dirs_cmd(*, store_from_path, db_path: str | None, limit: int, color: bool) -> None:
    """Show recent directory visits, oldest first."""

    store = store_from_path(db_path)
    with exit_on_error():
        rows = store.recent_dirs(limit)
    print_json([row.to_dict() for row in rows], color=color)


def recent_files_cmd(*, store_from_path, db_path: str | None, limit: int, color: bool) -> None:
    """Show recent file events, oldest first."""

    store = store_from_path(db_path)
    with exit_on_error():
        rows = store.recent_files(limit)
    print_json([row.to_dict() for row in rows], color=color)


def popular_dirs_cmd(*, store_from_path, db_path: str | None, limit: int, color: bool) -> None:
    """Show the most visited directories."""

    store = store_from_path(db_path)
    with exit_on_error():
        rows = store.popular_dirs(limit)
    print_json([row.to_dict() for row in rows], color=color)


def file_stats_cmd(*, store_from_path, db_path: str | None, color: bool) -> None:
    store = store_from_path(db_path)
    with exit_on_error():
        stats = store.file_stats()
    print_json([stat.to_dict() for stat in stats], color=color)


def search_cmd(*, store_from_path, db_path: str | None, query: str, color: bool) -> None:
    store = store_from_path(db_path)
    with exit_on_error():
        results = store.search(query)
    print_json(results.to_dict(), color=color)
