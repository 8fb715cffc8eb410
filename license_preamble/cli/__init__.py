"""
license-preamble CLI — Package init.

Re-exports the main CLI group and shared utilities.
"""

from __future__ import annotations

import logging
import sys
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape

from license_preamble import __version__, config
from license_preamble.exceptions import PreambleError

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s — %(message)s",
        datefmt="%H:%M:%S",
    )


def fail(error: PreambleError | OSError) -> NoReturn:
    """Print a fatal error and exit with status 1."""
    err_console.print(f"[bold red]Error:[/] {escape(str(error))}")
    sys.exit(1)


# ─── Main Group ──────────────────────────────────────────────────

@click.group()
@click.version_option(__version__, prog_name="license-preamble")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Adds a license preamble to source files."""
    setup_logging(verbose)


# ─── Register all sub-modules ───────────────────────────────────
from license_preamble.cli import core  # noqa: E402, F401


if __name__ == "__main__":
    cli()
