"""Copying a crate's ``README.md`` into the package directory."""

from __future__ import annotations

import shutil
from pathlib import Path

from .progressbar import PBAR


def copy_from_crate(path: Path | str, out_dir: Path | str) -> None:
    """Copy ``README.md`` from ``path`` into ``out_dir``, warning if there is none."""
    path = Path(path)
    out_dir = Path(out_dir)
    if not path.is_dir():
        raise NotADirectoryError("crate directory should exist")
    if not out_dir.is_dir():
        raise NotADirectoryError("crate's pkg directory should exist")

    source = path / "README.md"
    if not source.exists():
        PBAR.warn("origin crate has no README")
        return
    try:
        shutil.copyfile(source, out_dir / "README.md")
    except OSError as exc:
        raise OSError("failed to copy README") from exc