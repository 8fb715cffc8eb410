"""License lookup by title or SPDX identifier."""

from __future__ import annotations

import logging
from typing import Iterable

from license_preamble.catalog.loader import get_catalog
from license_preamble.catalog.models import LicenseRecord
from license_preamble.exceptions import InvalidLicense

logger = logging.getLogger("license_preamble.catalog")


def resolve(name: str, catalog: Iterable[LicenseRecord] | None = None) -> LicenseRecord:
    """Return the first record whose title or identifier equals ``name``.

    Matching is exact and case-sensitive: ``mit`` does not find ``MIT``.
    """
    records = get_catalog() if catalog is None else catalog
    for record in records:
        if record.matches(name):
            logger.debug("Resolved %r to %s", name, record.identifier)
            return record
    raise InvalidLicense(name)
