"""
license-preamble — Project state.

The two files `init` leaves at the project root: LICENSE (full license
text) and PREAMBLE (the notice stamped into sources, by default a symlink
to LICENSE).
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from license_preamble import config
from license_preamble.catalog import LicenseRecord, resolve
from license_preamble.exceptions import EmptyPreamble, MissingPreamble, UnreadablePreamble
from license_preamble.utils import read_text_exact

logger = logging.getLogger("license_preamble.project")

LINKED = "linked"
COPIED = "copied"
EXISTS = "exists"


@dataclass
class InitResult:
    """Outcome of `init` for one project directory."""

    license: LicenseRecord
    license_path: Path
    preamble_path: Path
    license_written: bool
    preamble_status: str    # LINKED, COPIED or EXISTS


def license_path(project_dir: str | Path = ".") -> Path:
    return Path(project_dir) / config.LICENSE_FILENAME


def preamble_path(project_dir: str | Path = ".") -> Path:
    return Path(project_dir) / config.PREAMBLE_FILENAME


def write_license(record: LicenseRecord, project_dir: str | Path = ".") -> bool:
    """Write the trimmed license body to LICENSE unless it already exists."""
    path = license_path(project_dir)
    if os.path.lexists(path):
        logger.info("Refusing to overwrite %s", path)
        return False
    path.write_text(record.body.strip(), encoding="utf-8")
    logger.info("Wrote %s (%s)", path, record.identifier)
    return True


def link_preamble(project_dir: str | Path = ".") -> str:
    """Point PREAMBLE at LICENSE.

    A relative symlink keeps PREAMBLE in step with later LICENSE edits.
    Where symlinks are unavailable the content is copied instead, and
    COPIED is returned so the caller can say a re-sync is needed.
    """
    path = preamble_path(project_dir)
    if os.path.lexists(path):
        logger.info("Refusing to overwrite %s", path)
        return EXISTS

    target = license_path(project_dir)
    try:
        path.symlink_to(os.path.relpath(target, path.parent))
    except (OSError, NotImplementedError) as e:
        logger.info("Cannot symlink %s (%s), copying %s instead", path, e, target)
        shutil.copyfile(target, path)
        return COPIED

    logger.info("Linked %s -> %s", path, target)
    return LINKED


def init_project(name: str, project_dir: str | Path = ".") -> InitResult:
    """Resolve ``name`` and create LICENSE and PREAMBLE in ``project_dir``.

    Raises InvalidLicense before touching the filesystem.
    """
    record = resolve(name)
    written = write_license(record, project_dir)
    status = link_preamble(project_dir)
    return InitResult(
        license=record,
        license_path=license_path(project_dir),
        preamble_path=preamble_path(project_dir),
        license_written=written,
        preamble_status=status,
    )


def read_preamble(project_dir: str | Path = ".") -> str:
    """Full PREAMBLE text.

    Raises MissingPreamble, UnreadablePreamble (I/O or decoding failure)
    or EmptyPreamble.
    """
    path = preamble_path(project_dir)
    if not path.exists():
        raise MissingPreamble(path)
    try:
        text = read_text_exact(path)
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadablePreamble(path, e) from e
    if not text.strip():
        raise EmptyPreamble(path)
    return text
