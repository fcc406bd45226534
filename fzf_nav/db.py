from __future__ import annotations

import sqlite3
from pathlib import Path

DB_FILENAME = ".fzf.db"


def default_db_path() -> Path:
    """Return ``~/.fzf.db``, or ``.fzf.db`` in the working directory when there is no home."""
    try:
        home = Path.home()
    except RuntimeError:
        home = Path(".")
    return home / DB_FILENAME


def connect(db_path: Path | str, *, create: bool = False) -> sqlite3.Connection:
    """Open the history database.

    Without ``create`` the file must already exist; sqlite would otherwise
    create an empty database and every query would fail with "no such table".
    """
    path = Path(db_path).expanduser()
    if create:
        path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(path)
    else:
        conn = sqlite3.connect(f"{path.absolute().as_uri()}?mode=rw", uri=True)
    conn.row_factory = sqlite3.Row
    return conn


def initialize_schema(conn: sqlite3.Connection) -> None:
    try:
        conn.execute("PRAGMA journal_mode = WAL")
    except sqlite3.OperationalError:
        conn.execute("PRAGMA journal_mode = DELETE")
    conn.executescript(
        """
        CREATE TABLE IF NOT EXISTS directory_history (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            path TEXT NOT NULL,
            timestamp DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP
        );
        CREATE INDEX IF NOT EXISTS idx_directory_history_timestamp
            ON directory_history(timestamp DESC);
        CREATE INDEX IF NOT EXISTS idx_directory_history_path ON directory_history(path);

        CREATE TABLE IF NOT EXISTS file_history (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            path TEXT NOT NULL,
            file_type TEXT NOT NULL,
            action TEXT NOT NULL,
            timestamp DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP
        );
        CREATE INDEX IF NOT EXISTS idx_file_history_timestamp ON file_history(timestamp DESC);
        CREATE INDEX IF NOT EXISTS idx_file_history_path ON file_history(path);
        """
    )
    conn.commit()
