"""Checking crates.io for a newer ``wasm-pack``, at most once a day."""

from __future__ import annotations

import json
import sys
import urllib.error
import urllib.request
from datetime import datetime
from importlib import metadata
from pathlib import Path

CRATES_IO_URL = "https://crates.io/api/v1/crates/wasm-pack"
_RECHECK_HOURS = 24


class VersionCheckError(Exception):
    """Raised when the latest version cannot be fetched."""


def _own_version() -> str:
    try:
        return metadata.version("wasmpack")
    except metadata.PackageNotFoundError:
        return "unknown"


def _stamp_file_path() -> Path | None:
    program = sys.argv[0] if sys.argv else ""
    if not program:
        return None
    return Path(program).resolve().with_suffix(".stamp")


def _read_stamp_file() -> str | None:
    path = _stamp_file_path()
    if path is None:
        return None
    try:
        return path.read_text(encoding="utf-8")
    except OSError:
        return None


def _write_stamp_file(now: datetime, version: str | None) -> None:
    path = _stamp_file_path()
    if path is None:
        return
    contents = f"created {now.isoformat()}"
    if version is not None:
        contents += f"\nversion {version}"
    try:
        path.write_text(contents, encoding="utf-8")
    except OSError:
        pass


def read_stamp_file_value(contents: str, word: str) -> str | None:
    """The value after ``word`` on the first line that starts with it."""
    line = next((line for line in contents.splitlines() if line.startswith(word)), None)
    if line is None:
        return None
    parts = line.split()
    return parts[1] if len(parts) > 1 else None


def fetch_latest_wasm_pack_version() -> str:
    """Ask crates.io for the newest published version."""
    request = urllib.request.Request(
        CRATES_IO_URL, headers={"User-Agent": f"wasm-pack/{_own_version()}"}
    )
    try:
        with urllib.request.urlopen(request, timeout=30) as response:
            status = response.status
            body = response.read()
    except urllib.error.HTTPError as exc:
        status, body = exc.code, b""
    except (urllib.error.URLError, OSError) as exc:
        raise VersionCheckError(f"failed to query {CRATES_IO_URL}") from exc
    if not 200 <= status < 300:
        raise VersionCheckError(
            f"Received a bad HTTP status code ({status}) when checking for newer "
            f"wasm-pack version at: {CRATES_IO_URL}"
        )
    try:
        return str(json.loads(body.decode("utf-8", errors="replace"))["crate"]["max_version"])
    except (ValueError, KeyError, TypeError) as exc:
        raise VersionCheckError("unexpected response from crates.io") from exc


def _query_and_record(now: datetime) -> str:
    # The stamp is rewritten even on failure so the API is not hit on every run.
    try:
        version = fetch_latest_wasm_pack_version()
    except VersionCheckError:
        _write_stamp_file(now, None)
        raise
    _write_stamp_file(now, version)
    return version


def _parse_time(text: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return parsed if parsed.tzinfo is not None else None


def latest_wasm_pack_version() -> str | None:
    """The latest version, from the stamp file if checked within a day."""
    now = datetime.now().astimezone()
    contents = _read_stamp_file()
    if contents is None:
        return _query_and_record(now)
    created = read_stamp_file_value(contents, "created")
    last_updated = _parse_time(created) if created is not None else None
    if last_updated is None:
        return None
    hours = int((now - last_updated).total_seconds() / 3600)
    if hours > _RECHECK_HOURS:
        return _query_and_record(now)
    return read_stamp_file_value(contents, "version")