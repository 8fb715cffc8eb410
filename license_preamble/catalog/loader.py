"""Parse the bundled choosealicense.com documents into LicenseRecords."""

from __future__ import annotations

import functools
import logging
import re
from pathlib import Path

import yaml

from license_preamble import config
from license_preamble.catalog.models import LicenseRecord
from license_preamble.exceptions import CatalogError

logger = logging.getLogger("license_preamble.catalog")

_FRONT_MATTER = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)(.*)\Z", re.DOTALL)

REQUIRED_FIELDS = ("title", "spdx-id", "description", "how", "permissions", "conditions", "limitations")


def parse_document(text: str, source: str = "<string>") -> LicenseRecord:
    """Split a document into YAML front matter and body.

    Raises CatalogError when the front matter is missing, is not a
    mapping, or lacks one of REQUIRED_FIELDS.
    """
    match = _FRONT_MATTER.match(text)
    if match is None:
        raise CatalogError(f"{source}: missing front matter block")
    raw_meta, body = match.groups()

    try:
        meta = yaml.safe_load(raw_meta)
    except yaml.YAMLError as e:
        raise CatalogError(f"{source}: invalid front matter: {e}") from e
    if not isinstance(meta, dict):
        raise CatalogError(f"{source}: front matter is not a mapping")

    missing = [k for k in REQUIRED_FIELDS if k not in meta]
    if missing:
        raise CatalogError(f"{source}: missing field(s) {', '.join(missing)}")

    return LicenseRecord(
        title=str(meta["title"]),
        identifier=str(meta["spdx-id"]),
        body=body,
        description=meta["description"],
        how=meta["how"],
        using=dict(meta.get("using") or {}),
        permissions=tuple(meta["permissions"] or ()),
        conditions=tuple(meta["conditions"] or ()),
        limitations=tuple(meta["limitations"] or ()),
        featured=bool(meta.get("featured", False)),
        nickname=meta.get("nickname"),
    )


def load(catalog_dir: str | Path | None = None) -> tuple[LicenseRecord, ...]:
    """Load every document in the catalog directory, sorted by file name."""
    d = Path(catalog_dir) if catalog_dir is not None else config.CATALOG_DIR
    paths = sorted(d.glob("*.txt"))
    if not paths:
        raise CatalogError(f"No license documents found in {d}")

    records = []
    for p in paths:
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogError(f"{p.name}: {e}") from e
        records.append(parse_document(text, source=p.name))

    logger.debug("Loaded %d licenses from %s", len(records), d)
    return tuple(records)


@functools.lru_cache(maxsize=1)
def get_catalog() -> tuple[LicenseRecord, ...]:
    """Process-wide catalog, loaded on first use."""
    return load()
