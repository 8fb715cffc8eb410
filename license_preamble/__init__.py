"""
license-preamble — License headers for source trees.

Picks a license from a bundled catalog, records it as LICENSE/PREAMBLE at
the project root and stamps the preamble into every source file once.
"""

__version__ = "0.1.0"
__author__ = "Pedro Tacla Yamada"

from license_preamble.catalog import LicenseRecord, get_catalog, resolve
from license_preamble.inject import InjectReport, add_preamble, inject_preamble

__all__ = [
    "InjectReport",
    "LicenseRecord",
    "__version__",
    "add_preamble",
    "get_catalog",
    "inject_preamble",
    "resolve",
]
