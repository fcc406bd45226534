from typer.testing import CliRunner

from fzf_nav.cli import app

runner = CliRunner()


def test_root_help_lists_commands() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in (
        "recent-dirs",
        "recent-files",
        "popular-dirs",
        "file-stats",
        "search",
        "change-to-dir",
        "change-to-file",
        "init-db",
        "db",
    ):
        assert command in result.stdout


def test_db_help_shows_prune_command() -> None:
    result = runner.invoke(app, ["db", "--help"])
    assert result.exit_code == 0
    assert "prune" in result.stdout


def test_version_flag() -> None:
    from fzf_nav import __version__

    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
