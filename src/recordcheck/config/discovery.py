"""Locating and reading ``recordcheck.toml``.

Lookup order: the ``RECORDCHECK_CONFIG`` env var, then the first
``recordcheck.toml`` found walking up from the start directory to the
filesystem root. The ``--config`` CLI flag bypasses discovery entirely
(see :meth:`RecordcheckSettings.from_cli`).
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from recordcheck.config.models import RecordcheckConfig

CONFIG_FILENAME = "recordcheck.toml"
CONFIG_ENV_VAR = "RECORDCHECK_CONFIG"


class ConfigFileError(ValueError):
    """A config file exists but is not valid TOML."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid TOML in {path}: {reason}")
        self.path = path


def _ancestors(start: Path) -> Iterator[Path]:
    current = start.resolve()
    yield current
    yield from current.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A set but dangling ``RECORDCHECK_CONFIG`` yields None rather than
    falling back to the walk-up search.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    for directory in _ancestors(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        ConfigFileError: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileError(path, str(exc)) from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> RecordcheckConfig:
    """Load and validate a :class:`RecordcheckConfig`.

    Discovers the file from *cwd* when *path* is None; with no file at
    all, returns the defaults (no schemas, plugins enabled).
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return RecordcheckConfig()
    return RecordcheckConfig.model_validate(read_toml(path))
