"""license-preamble Injector — stamp the preamble into source trees."""

from .engine import add_preamble, inject_file, inject_preamble
from .formatter import comment_prefix_for, format_preamble
from .types import FileOutcome, InjectReport
from .walker import iter_source_files

__all__ = [
    "FileOutcome",
    "InjectReport",
    "add_preamble",
    "comment_prefix_for",
    "format_preamble",
    "inject_file",
    "inject_preamble",
    "iter_source_files",
]
