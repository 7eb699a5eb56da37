"""Self-installation of the running ``wasm-pack`` executable next to ``rustup``."""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path
from typing import Sequence

_EXE_SUFFIX = ".exe" if os.name == "nt" else ""


class InstallError(Exception):
    """Raised when self-installation cannot go ahead."""


def find_destination() -> Path:
    """Where ``wasm-pack`` is installed: beside ``rustup`` in ``PATH``."""
    rustup = shutil.which("rustup")
    if rustup is None:
        raise InstallError(
            "failed to find an installation of `rustup` in `PATH`, "
            "is rustup already installed?"
        )
    rustup_path = Path(rustup)
    directory = rustup_path.parent
    if directory == rustup_path:
        raise InstallError("can't install when `rustup` is at the root of the filesystem")
    return directory / f"wasm-pack{_EXE_SUFFIX}"


def confirm_can_overwrite(destination: Path, argv: Sequence[str] | None = None) -> None:
    """Allow overwriting ``destination`` via ``-f`` or an interactive yes."""
    args = sys.argv if argv is None else argv
    if "-f" in args:
        return
    if not sys.stdin.isatty():
        raise InstallError(
            f"existing wasm-pack installation found at `{destination}`, pass `-f` to "
            "force installation over this file, otherwise aborting installation now"
        )
    print(f"info: existing wasm-pack installation found at `{destination}`", file=sys.stderr)
    print("info: would you like to overwrite this file? [y/N]: ", end="", file=sys.stderr, flush=True)
    try:
        line = sys.stdin.readline()
    except OSError as exc:
        raise InstallError("failed to read stdin") from exc
    if line.startswith(("y", "Y")):
        return
    raise InstallError("aborting installation")


def _current_executable() -> Path:
    program = sys.argv[0] if sys.argv else ""
    if not program:
        raise InstallError("cannot determine the running executable")
    return Path(program).resolve()


def do_install(argv: Sequence[str] | None = None) -> Path:
    """Copy the running executable into place and return the destination."""
    destination = find_destination()
    if destination.exists():
        confirm_can_overwrite(destination, argv)
    source = _current_executable()
    try:
        shutil.copy(source, destination)
    except OSError as exc:
        raise InstallError(f"failed to copy executable to `{destination}`") from exc
    print(f"info: successfully installed wasm-pack to `{destination}`")
    return destination


def install(argv: Sequence[str] | None = None) -> None:
    """Run the installation, report any failure, then exit with status 0."""
    try:
        do_install(argv)
    except InstallError as exc:
        print(exc, file=sys.stderr)
        cause = exc.__cause__
        while cause is not None:
            print(f"Caused by: {cause}", file=sys.stderr)
            cause = cause.__cause__
    if os.name == "nt":
        print("Press enter to close this window...")
        sys.stdin.readline()
    raise SystemExit(0)