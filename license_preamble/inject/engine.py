"""Preamble injection over one or more source roots."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from license_preamble import config
from license_preamble.project import read_preamble
from license_preamble.utils import atomic_write, read_text_exact

from .constants import BLOCK_SEPARATOR
from .formatter import comment_prefix_for, extension_of, format_preamble
from .types import ADDED, ERROR, SKIPPED, FileOutcome, InjectReport
from .walker import iter_source_files

logger = logging.getLogger("license_preamble.inject")


def inject_file(path: Path, block: str) -> FileOutcome:
    """Prepend ``block`` to one file unless it already contains it.

    I/O and decoding failures are returned as an ERROR outcome.
    """
    try:
        content = read_text_exact(path)
        if block in content:
            logger.debug("Skipping %s (preamble present)", path)
            return FileOutcome(path, SKIPPED)
        atomic_write(path, block + BLOCK_SEPARATOR + content)
    except (OSError, UnicodeDecodeError) as e:
        logger.info("Failed to add preamble to %s: %s", path, e)
        return FileOutcome(path, ERROR, error=str(e))

    logger.info("Added preamble to %s", path)
    return FileOutcome(path, ADDED)


def inject_preamble(
    roots: Iterable[str | Path],
    preamble: str,
    on_outcome=None,
) -> InjectReport:
    """Stamp ``preamble`` into every eligible file under ``roots``.

    Missing roots are skipped. Files whose extension has no comment rule
    are left alone. ``on_outcome``, if given, is called with each
    FileOutcome as soon as it is known.
    """
    report = InjectReport()
    blocks: dict[str, str] = {}

    def record(outcome: FileOutcome) -> None:
        report.outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)

    for root in roots:
        if not os.path.lexists(root):
            logger.debug("Source root %s does not exist, skipping", root)
            report.missing_roots.append(str(root))
            continue

        def walk_error(err: OSError, root=root) -> None:
            failed = Path(err.filename) if err.filename else Path(root)
            logger.info("Cannot list %s: %s", failed, err)
            record(FileOutcome(failed, ERROR, error=str(err)))

        for path in iter_source_files(root, onerror=walk_error):
            prefix = comment_prefix_for(extension_of(path))
            if prefix is None:
                continue
            if prefix not in blocks:
                blocks[prefix] = format_preamble(preamble, prefix)

            record(inject_file(path, blocks[prefix]))

    logger.info(
        "Preamble run finished: %d added, %d skipped, %d failed",
        report.added,
        report.skipped,
        report.failed,
    )
    return report


def add_preamble(
    roots: Iterable[str | Path] | None = None,
    project_dir: str | Path = ".",
    on_outcome=None,
) -> InjectReport:
    """Read PREAMBLE from ``project_dir`` and inject it under ``roots``.

    Relative roots are taken relative to ``project_dir``. Raises
    MissingPreamble before touching any file when PREAMBLE is absent.
    """
    base = Path(project_dir)
    preamble = read_preamble(base)
    roots = list(roots) if roots else list(config.DEFAULT_SOURCE_ROOTS)
    return inject_preamble([base / r for r in roots], preamble, on_outcome=on_outcome)
