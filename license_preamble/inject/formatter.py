"""Comment syntax lookup and preamble formatting."""

from __future__ import annotations

from pathlib import Path

from .constants import COMMENT_PREFIXES


def comment_prefix_for(extension: str) -> str | None:
    """Line comment prefix for an extension, or None if it has no rule."""
    return COMMENT_PREFIXES.get(extension)


def extension_of(path: str | Path) -> str:
    """Extension without the leading dot; empty for dotfiles and bare names."""
    return Path(path).suffix[1:]


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def format_preamble(text: str, prefix: str) -> str:
    """Prefix every preamble line with ``prefix`` and a space.

    Trailing whitespace is stripped per line, so blank lines come out as
    the bare prefix. The result has no trailing newline.
    """
    return "\n".join(f"{prefix} {line}".rstrip() for line in _split_lines(text))
