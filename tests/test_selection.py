from __future__ import annotations

from pathlib import Path

from fzf_nav.selection import history_paths, select_from_history

FIRST_LINE = ["head", "-n", "1"]


def test_history_paths_are_most_recent_first(store, history) -> None:
    history.add_dir("/a", "2024-05-01 09:00:00")
    history.add_dir("/b", "2024-05-01 10:00:00")
    history.add_dir("/c", "2024-05-01 11:00:00")

    assert history_paths(store, "directory", 2) == ["/c", "/b"]


def test_select_offers_most_recent_directory_first(store, history, tmp_path: Path) -> None:
    older = tmp_path / "older"
    newer = tmp_path / "newer"
    older.mkdir()
    newer.mkdir()
    history.add_dir(older, "2024-05-01 09:00:00")
    history.add_dir(newer, "2024-05-01 10:00:00")
    history.add_dir(older, "2024-05-01 08:00:00")

    outcome = select_from_history(store, "directory", 100, picker_command=FIRST_LINE)

    assert outcome.status == "selected"
    assert outcome.path == str(newer.resolve())
    assert outcome.candidates == 2


def test_select_file(store, history, tmp_path: Path) -> None:
    target = tmp_path / "notes.md"
    target.write_text("hello")
    history.add_file(target, "2024-05-01 09:00:00", "md", "edit")

    outcome = select_from_history(store, "file", 100, picker_command=FIRST_LINE)

    assert outcome.status == "selected"
    assert outcome.path == str(target.resolve())


def test_select_with_empty_history(store) -> None:
    outcome = select_from_history(store, "directory", 100, picker_command=FIRST_LINE)

    assert outcome.status == "no_history"


def test_select_without_resolvable_candidates(store, history, monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.chdir(tmp_path)
    history.add_dir("relative/gone", "2024-05-01 09:00:00")

    outcome = select_from_history(store, "directory", 100, picker_command=["false"])

    assert outcome.status == "no_candidates"


def test_select_cancelled(store, history, tmp_path: Path) -> None:
    history.add_dir(tmp_path, "2024-05-01 09:00:00")

    outcome = select_from_history(store, "directory", 100, picker_command=["false"])

    assert outcome.status == "cancelled"
    assert outcome.path is None


def test_select_empty_picker_output(store, history, tmp_path: Path) -> None:
    history.add_dir(tmp_path, "2024-05-01 09:00:00")

    outcome = select_from_history(store, "directory", 100, picker_command=["true"])

    assert outcome.status == "empty"


def test_select_stale_entry(store, history, tmp_path: Path) -> None:
    gone = tmp_path / "gone"
    history.add_dir(gone, "2024-05-01 09:00:00")

    outcome = select_from_history(store, "directory", 100, picker_command=FIRST_LINE)

    assert outcome.status == "stale"
    assert outcome.path == str(gone)


def test_select_wrong_kind_is_stale(store, history, tmp_path: Path) -> None:
    history.add_file(tmp_path, "2024-05-01 09:00:00", "dir", "open")

    outcome = select_from_history(store, "file", 100, picker_command=FIRST_LINE)

    assert outcome.status == "stale"


def test_select_uses_home_for_missing_relative_paths(store, history, tmp_path: Path) -> None:
    history.add_dir("projects/missing", "2024-05-01 09:00:00")

    outcome = select_from_history(
        store, "directory", 100, picker_command=FIRST_LINE, home=str(tmp_path)
    )

    assert outcome.status == "stale"
    assert outcome.path == str(tmp_path / "projects" / "missing")
