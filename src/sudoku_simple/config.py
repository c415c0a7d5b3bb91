"""
Configuration and environment loading for console Sudoku.

- Loads settings.yml (YAML) from repo root if present; falls back to environment variables (.env supported).
- Exposes SETTINGS with display and logging knobs. Game rules are fixed and not configurable.
"""
from dataclasses import dataclass
import logging
import os
from typing import Any, Callable

import yaml
from dotenv import load_dotenv

load_dotenv()

log = logging.getLogger("config")


def _repo_root() -> str:
    # this file: src/sudoku_simple/config.py → repo root is two levels up
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))


def _load_yaml(path: str) -> dict:
    if not os.path.isfile(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    return data


def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in {"1", "true", "yes", "on"}:
        return True
    if s in {"0", "false", "no", "off", ""}:
        return False
    raise ValueError(f"not a boolean: {val!r}")


_cfg = _load_yaml(os.path.join(_repo_root(), "settings.yml"))


def _get(name: str, default: Any, cast: Callable[[Any], Any] | None = None) -> Any:
    # YAML takes precedence
    if name in _cfg:
        val = _cfg[name]
        return cast(val) if cast else val
    env = os.environ.get(name)
    if env is not None:
        return cast(env) if cast else env
    return default


def _get_bool(name: str, default: bool) -> bool:
    try:
        return _get(name, default, cast=_as_bool)
    except ValueError:
        log.warning("Ignoring %s: not a boolean, using default %s", name, default)
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    clear_screen: bool
    show_metrics: bool


SETTINGS = Settings(
    log_level=str(_get("SUDOKU_LOG_LEVEL", "WARNING")).upper(),
    clear_screen=_get_bool("SUDOKU_CLEAR_SCREEN", True),
    show_metrics=_get_bool("SUDOKU_SHOW_METRICS", False),
)
