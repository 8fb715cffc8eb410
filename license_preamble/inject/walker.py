"""Deterministic recursive file enumeration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterator


def _is_regular_file(path: Path) -> bool:
    return not path.is_symlink() and path.is_file()


def iter_source_files(
    root: str | Path,
    onerror: Callable[[OSError], None] | None = None,
) -> Iterator[Path]:
    """Yield every regular file under ``root`` in sorted order.

    Symlinks are never yielded and symlinked directories are not entered.
    A root that is itself a regular file yields just that file. A directory
    that cannot be listed is passed to ``onerror`` (re-raised when it is
    None) and the walk continues with its siblings.
    """
    p = Path(root)
    if _is_regular_file(p):
        yield p
        return

    def _raise(err: OSError) -> None:
        raise err

    for dirpath, dirs, files in os.walk(p, onerror=onerror or _raise):
        dirs.sort()
        for f in sorted(files):
            fp = Path(dirpath) / f
            if _is_regular_file(fp):
                yield fp
