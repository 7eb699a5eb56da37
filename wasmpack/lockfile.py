"""Reading the ``Cargo.lock`` file of a crate's workspace."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


class LockfileError(Exception):
    """Raised when ``Cargo.lock`` is missing, unreadable or lacks a dependency."""


def get_lockfile_path(crate_data: Any) -> Path:
    """Path of ``Cargo.lock`` in the crate's workspace root."""
    path = Path(crate_data.workspace_root) / "Cargo.lock"
    if not path.is_file():
        raise LockfileError(f'Could not find lockfile at "{path}"')
    return path


def _packages_from_document(document: Mapping[str, Any]) -> dict[str, str]:
    if "package" not in document:
        raise ValueError("missing field `package`")
    entries = document["package"]
    if not isinstance(entries, list):
        raise ValueError("invalid type for `package`: expected an array")
    versions: dict[str, str] = {}
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise ValueError("invalid package entry: expected a table")
        name, version = entry.get("name"), entry.get("version")
        if not isinstance(name, str) or not isinstance(version, str):
            raise ValueError("package entry needs a `name` and a `version`")
        versions.setdefault(name, version)
    return versions


@dataclass(frozen=True)
class Lockfile:
    """Package versions recorded in ``Cargo.lock``, first entry per name."""

    packages: Mapping[str, str]

    @classmethod
    def load(cls, crate_data: Any) -> "Lockfile":
        """Read the lock file of the workspace that ``crate_data`` belongs to."""
        path = get_lockfile_path(crate_data)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise LockfileError(f"failed to read: {path}") from exc
        try:
            packages = _packages_from_document(tomllib.loads(text))
        except ValueError as exc:
            raise LockfileError(f"failed to parse: {path}") from exc
        return cls(packages=packages)

    def get_package_version(self, package: str) -> str | None:
        """The locked version of ``package``, if it is present."""
        return self.packages.get(package)

    def wasm_bindgen_version(self) -> str | None:
        """The locked version of ``wasm-bindgen``."""
        return self.get_package_version("wasm-bindgen")

    def require_wasm_bindgen(self) -> str:
        """The locked version of ``wasm-bindgen``; raise if it is absent."""
        version = self.wasm_bindgen_version()
        if version is None:
            raise LockfileError(
                'Ensure that you have "wasm-bindgen" as a dependency in your Cargo.toml file:\n'
                "[dependencies]\n"
                'wasm-bindgen = "0.2"'
            )
        return version

    def wasm_bindgen_test_version(self) -> str | None:
        """The locked version of ``wasm-bindgen-test``."""
        return self.get_package_version("wasm-bindgen-test")