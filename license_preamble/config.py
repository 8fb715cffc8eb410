"""
license-preamble — Configuration.
Shared settings and file names for the entire codebase.
"""

import os
from pathlib import Path

# Bundled catalog (choosealicense.com format)
CATALOG_DIR = Path(__file__).parent / "catalog" / "licenses"


def _split_roots(raw: str) -> list[str]:
    return [r.strip() for r in raw.split(",") if r.strip()]


def reload() -> None:
    """Re-read every setting from the environment."""
    global LICENSE_FILENAME, PREAMBLE_FILENAME, DEFAULT_SOURCE_ROOTS, LOG_LEVEL

    # Project state files, relative to the project directory
    LICENSE_FILENAME = os.environ.get("LICENSE_PREAMBLE_LICENSE_FILE", "LICENSE")
    PREAMBLE_FILENAME = os.environ.get("LICENSE_PREAMBLE_PREAMBLE_FILE", "PREAMBLE")

    # Roots walked by `add` when none are given
    DEFAULT_SOURCE_ROOTS = _split_roots(os.environ.get("LICENSE_PREAMBLE_ROOTS", "src,lib"))

    # Logging
    LOG_LEVEL = os.environ.get("LICENSE_PREAMBLE_LOG_LEVEL", "WARNING").upper()


LICENSE_FILENAME: str
PREAMBLE_FILENAME: str
DEFAULT_SOURCE_ROOTS: list[str]
LOG_LEVEL: str

reload()
