"""Default locations for the config file, staged backups and logs.

Everything lives under the project directory (the nearest parent holding
``pyproject.toml``) unless ``DBRESTORE_CONFIG`` or ``DBRESTORE_WORK_DIR``
point elsewhere.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final


_ENV_CONFIG_FILE: Final[str] = "DBRESTORE_CONFIG"
_ENV_WORK_DIR: Final[str] = "DBRESTORE_WORK_DIR"


def _project_dir() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "pyproject.toml").exists():
            return candidate
    return Path.cwd()


def _from_env(env: Mapping[str, str] | None, name: str, fallback: Path) -> Path:
    override = (env if env is not None else os.environ).get(name, "").strip()
    return Path(override or fallback).expanduser().resolve()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return ``config/config.toml`` under the project, or ``$DBRESTORE_CONFIG``."""

    return _from_env(env, _ENV_CONFIG_FILE, _project_dir() / "config" / "config.toml")


def default_work_dir(env: Mapping[str, str] | None = None) -> Path:
    """Return the directory where backups are staged before loading."""

    return _from_env(env, _ENV_WORK_DIR, _project_dir() / ".work")


def default_log_file() -> Path:
    return (_project_dir() / "logs" / "dbrestore.log").resolve()


__all__ = ["default_config_path", "default_log_file", "default_work_dir"]
