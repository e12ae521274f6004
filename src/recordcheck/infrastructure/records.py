"""Record loading: JSON and YAML files decoded into input records.

A file holding a single mapping yields one record; a file holding a list
of mappings yields one record per element. Anything else is rejected
with :class:`RecordLoadError` before validation starts.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

JSON_SUFFIXES = frozenset({".json"})
YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class RecordLoadError(Exception):
    """A record source could not be read or does not hold records."""


def _new_yaml() -> YAML:
    """Create a fresh safe YAML loader.

    The safe loader yields plain dicts and lists, so loaded records
    compare equal to literals in tests and serialize without ruamel types.
    """
    return YAML(typ="safe", pure=True)


def _as_records(data: Any, source: str) -> list[dict[str, Any]]:
    if isinstance(data, Mapping):
        return [dict(data)]
    if isinstance(data, list):
        records: list[dict[str, Any]] = []
        for idx, item in enumerate(data):
            if not isinstance(item, Mapping):
                msg = f"{source}: item {idx} is a {type(item).__name__}, expected a mapping"
                raise RecordLoadError(msg)
            records.append(dict(item))
        return records
    msg = f"{source}: expected a mapping or a list of mappings, got {type(data).__name__}"
    raise RecordLoadError(msg)


def parse_text(text: str, *, fmt: str, source: str = "<input>") -> list[dict[str, Any]]:
    """Parse *text* as ``"json"`` or ``"yaml"`` into a list of records."""
    try:
        if fmt == "json":
            data = json.loads(text)
        elif fmt == "yaml":
            data = _new_yaml().load(text)
        else:
            msg = f"Unsupported record format: {fmt}"
            raise RecordLoadError(msg)
    except (ValueError, YAMLError) as exc:
        msg = f"{source}: could not parse {fmt.upper()}: {exc}"
        raise RecordLoadError(msg) from exc
    return _as_records(data, source)


def parse_inline(text: str) -> dict[str, Any]:
    """Parse a single JSON object passed on the command line."""
    try:
        data = json.loads(text)
    except ValueError as exc:
        msg = f"--data is not valid JSON: {exc}"
        raise RecordLoadError(msg) from exc
    if not isinstance(data, dict):
        msg = f"--data must be a JSON object, got {type(data).__name__}"
        raise RecordLoadError(msg)
    return data


def load_records(path: Path) -> list[dict[str, Any]]:
    """Load records from a ``.json``, ``.yaml`` or ``.yml`` file.

    Raises:
        RecordLoadError: If the file is missing, unreadable, of an unknown
            type, unparsable, or does not hold mappings.
    """
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        fmt = "json"
    elif suffix in YAML_SUFFIXES:
        fmt = "yaml"
    else:
        msg = f"{path}: unsupported file type {suffix or '(none)'} (use .json, .yaml or .yml)"
        raise RecordLoadError(msg)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"{path}: {exc.strerror or exc}"
        raise RecordLoadError(msg) from exc
    except UnicodeDecodeError as exc:
        msg = f"{path}: not valid UTF-8 ({exc.reason} at byte {exc.start})"
        raise RecordLoadError(msg) from exc
    return parse_text(text, fmt=fmt, source=str(path))
