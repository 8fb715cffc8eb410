"""license-preamble Catalog — bundled licenses and lookup."""

from .loader import get_catalog, load, parse_document
from .models import LicenseRecord
from .resolver import resolve

__all__ = ["LicenseRecord", "get_catalog", "load", "parse_document", "resolve"]
