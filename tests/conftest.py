from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from fzf_nav.store import HistoryStore


class HistoryWriter:
    """Inserts rows the way the shell integration would."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path

    def _execute(self, sql: str, params: tuple) -> int:
        conn = sqlite3.connect(self.db_path)
        try:
            cur = conn.execute(sql, params)
            conn.commit()
            return int(cur.lastrowid or 0)
        finally:
            conn.close()

    def add_dir(self, path: str | Path, timestamp: str) -> int:
        return self._execute(
            "INSERT INTO directory_history(path, timestamp) VALUES (?, ?)",
            (str(path), timestamp),
        )

    def add_file(
        self, path: str | Path, timestamp: str, file_type: str = "py", action: str = "open"
    ) -> int:
        return self._execute(
            "INSERT INTO file_history(path, file_type, action, timestamp) VALUES (?, ?, ?, ?)",
            (str(path), file_type, action, timestamp),
        )

    def count(self, table: str) -> int:
        conn = sqlite3.connect(self.db_path)
        try:
            return int(conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0])
        finally:
            conn.close()

    def ids(self, table: str) -> list[int]:
        conn = sqlite3.connect(self.db_path)
        try:
            return [int(r[0]) for r in conn.execute(f"SELECT id FROM {table} ORDER BY id")]
        finally:
            conn.close()


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("FZF_NAV_CONFIG", str(tmp_path / "config" / "config.json"))
    for var in ("FZF_NAV_DB_PATH", "FZF_NAV_COLOR", "FZF_NAV_PICKER", "NO_COLOR"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    path = tmp_path / "history.db"
    HistoryStore(path).initialize()
    return path


@pytest.fixture
def store(db_path: Path) -> HistoryStore:
    return HistoryStore(db_path)


@pytest.fixture
def history(db_path: Path) -> HistoryWriter:
    return HistoryWriter(db_path)
