from __future__ import annotations

import json
import os
import shlex
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

CONFIG_RELATIVE_PATH = Path(".config") / "fzf-nav" / "config.json"
DEFAULT_PICKER_COMMAND = ["fzf", "--height=40%", "--reverse"]
DEFAULT_REPORT_LIMIT = 50
DEFAULT_SELECT_LIMIT = 100

_SWITCH_ON = frozenset({"1", "true", "yes", "on"})
_SWITCH_OFF = frozenset({"0", "false", "no", "off"})


@dataclass
class FzfNavConfig:
    db_path: str | None = None
    color: bool = True
    picker_command: list[str] = field(default_factory=lambda: list(DEFAULT_PICKER_COMMAND))
    report_limit: int = DEFAULT_REPORT_LIMIT
    select_limit: int = DEFAULT_SELECT_LIMIT


def config_location(path: Path | None = None) -> Path | None:
    """Where the config file lives: ``path``, ``$FZF_NAV_CONFIG``, or under the home directory.

    Returns None when no location applies, e.g. there is no home directory.
    """
    if path is not None:
        return path.expanduser()
    override = os.environ.get("FZF_NAV_CONFIG")
    if override:
        return Path(override).expanduser()
    try:
        return Path.home() / CONFIG_RELATIVE_PATH
    except RuntimeError:
        return None


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse the JSON config at ``path``; a missing or blank file is an empty config."""
    if path is None or not path.is_file():
        return {}
    raw = path.read_text()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid config json in {path}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"config must be an object: {path}")
    return data


def _switch(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _SWITCH_ON:
        return True
    if text in _SWITCH_OFF:
        return False
    return default


def _command(value: Any, default: list[str]) -> list[str]:
    if isinstance(value, str):
        parts = shlex.split(value)
    elif isinstance(value, list):
        parts = [str(item) for item in value]
    else:
        return default
    return parts or default


def _positive(value: Any, default: int) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


def load_config(path: Path | None = None, environ: Mapping[str, str] | None = None) -> FzfNavConfig:
    """Build the effective config: defaults, then the config file, then the environment."""
    cfg = FzfNavConfig()
    _apply_file(cfg, read_config(config_location(path)))
    _apply_env(cfg, os.environ if environ is None else environ)
    return cfg


def _apply_file(cfg: FzfNavConfig, data: dict[str, Any]) -> None:
    if data.get("db_path"):
        cfg.db_path = str(data["db_path"])
    if "color" in data:
        cfg.color = _switch(data["color"], cfg.color)
    if "picker_command" in data:
        cfg.picker_command = _command(data["picker_command"], cfg.picker_command)
    if "report_limit" in data:
        cfg.report_limit = _positive(data["report_limit"], cfg.report_limit)
    if "select_limit" in data:
        cfg.select_limit = _positive(data["select_limit"], cfg.select_limit)


def _apply_env(cfg: FzfNavConfig, environ: Mapping[str, str]) -> None:
    if environ.get("FZF_NAV_DB_PATH"):
        cfg.db_path = environ["FZF_NAV_DB_PATH"]
    if "FZF_NAV_COLOR" in environ:
        cfg.color = _switch(environ["FZF_NAV_COLOR"], cfg.color)
    # https://no-color.org: any non-empty value disables color
    if environ.get("NO_COLOR"):
        cfg.color = False
    if "FZF_NAV_PICKER" in environ:
        cfg.picker_command = _command(environ["FZF_NAV_PICKER"], cfg.picker_command)
