"""Key-value store kept in a ``*.stamps`` JSON file next to the executable."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any


class StampsError(Exception):
    """Raised when the stamps store cannot be read, parsed or written."""


def get_stamps_file_path() -> Path:
    """Path of the ``.stamps`` file belonging to the running program."""
    program = sys.argv[0] if sys.argv else ""
    if not program:
        raise StampsError("cannot get stamps file path")
    return Path(program).resolve().with_suffix(".stamps")


def read_stamps_file_to_json() -> Any:
    """Read the stamps file and decode its JSON content."""
    path = get_stamps_file_path()
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StampsError("cannot find or read stamps file") from exc
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise StampsError("stamps file doesn't contain valid JSON") from exc


def get_stamp_value(key: str, data: Any) -> str:
    """Return the string stored under ``key`` in decoded stamps ``data``."""
    value = data.get(key) if isinstance(data, dict) else None
    if not isinstance(value, str):
        raise StampsError(f"cannot get stamp value for key '{key}'")
    return value


def save_stamp_value(key: str, value: str) -> None:
    """Store ``value`` under ``key``, keeping the other entries."""
    try:
        data = read_stamps_file_to_json()
    except StampsError:
        data = {}
    if not isinstance(data, dict):
        raise StampsError("stamps file doesn't contain JSON object")
    data[key] = value
    path = get_stamps_file_path()
    try:
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as exc:
        raise StampsError("cannot write to stamps file") from exc