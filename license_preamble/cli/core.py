"""CLI commands: init, list, show, add."""

from __future__ import annotations

import sys

import click
from rich.markup import escape
from rich.panel import Panel

from license_preamble import config
from license_preamble.catalog import get_catalog, resolve
from license_preamble.cli import cli, console, err_console, fail
from license_preamble.exceptions import PreambleError
from license_preamble.inject import add_preamble
from license_preamble.inject.types import ADDED, SKIPPED
from license_preamble.project import COPIED, EXISTS, init_project

PROJECT_DIR_OPTION = click.option(
    "--dir",
    "project_dir",
    default=".",
    type=click.Path(file_okay=False),
    help="Project root holding LICENSE and PREAMBLE",
)


@cli.command()
@click.argument("license_name", metavar="LICENSE")
@PROJECT_DIR_OPTION
def init(license_name, project_dir) -> None:
    """Initialize LICENSE and PREAMBLE files."""
    try:
        result = init_project(license_name, project_dir)
    except (PreambleError, OSError) as e:
        fail(e)

    if result.license_written:
        console.print(
            f"[green]✓[/] Wrote {escape(str(result.license_path))} "
            f"([cyan]{escape(result.license.identifier)}[/])"
        )
    else:
        err_console.print(f"[yellow]Refusing to overwrite {config.LICENSE_FILENAME} file[/]")

    if result.preamble_status == EXISTS:
        err_console.print(f"[yellow]Refusing to overwrite {config.PREAMBLE_FILENAME} file[/]")
    elif result.preamble_status == COPIED:
        console.print(f"[green]✓[/] Copied {config.LICENSE_FILENAME} to {escape(str(result.preamble_path))}")
        err_console.print(
            f"[yellow]Symlinks are unavailable here: re-run init after editing "
            f"{config.LICENSE_FILENAME} to keep {config.PREAMBLE_FILENAME} in sync[/]"
        )
    else:
        console.print(
            f"[green]✓[/] Linked {escape(str(result.preamble_path))} → {config.LICENSE_FILENAME}"
        )


@cli.command("list")
@click.option("--featured", is_flag=True, help="Only show featured licenses")
def list_licenses(featured) -> None:
    """List available licenses."""
    for record in get_catalog():
        if featured and not record.featured:
            continue
        click.echo(f"{record.title:<60}   -  short:  {record.identifier}")


@cli.command()
@click.argument("license_name", metavar="LICENSE")
def show(license_name) -> None:
    """Show what a license permits, requires and limits."""
    try:
        record = resolve(license_name)
    except PreambleError as e:
        fail(e)

    lines = [
        f"[bold]{escape(record.title)}[/] ([cyan]{escape(record.identifier)}[/])",
        "",
        escape(record.description),
        "",
        f"[green]Permissions:[/] {', '.join(record.permissions) or '—'}",
        f"[yellow]Conditions:[/]  {', '.join(record.conditions) or '—'}",
        f"[red]Limitations:[/] {', '.join(record.limitations) or '—'}",
    ]
    if record.using:
        lines.append("")
        lines.append("[dim]Used by: " + escape(", ".join(record.using)) + "[/]")
    console.print(Panel("\n".join(lines), title="📜 License", border_style="cyan"))


def _print_outcome(outcome) -> None:
    if outcome.status == ADDED:
        console.print(f"Adding preamble to file {escape(str(outcome.path))}")
    elif outcome.status == SKIPPED:
        err_console.print(f"[dim]Skipping {escape(str(outcome.path))}[/]")
    else:
        err_console.print(f"[red]✗ {escape(str(outcome.path))}: {escape(outcome.error or '')}[/]")


@cli.command()
@click.argument("source_roots", nargs=-1, metavar="[ROOT]...")
@PROJECT_DIR_OPTION
def add(source_roots, project_dir) -> None:
    """Add the preamble to files (default roots: src, lib)."""
    try:
        report = add_preamble(source_roots or None, project_dir, on_outcome=_print_outcome)
    except PreambleError as e:
        fail(e)

    console.print(
        f"\n[bold]{report.added}[/] added, [bold]{report.skipped}[/] skipped, "
        f"[bold]{report.failed}[/] failed"
    )
    if not report.ok:
        err_console.print(f"[bold red]Error:[/] {report.failed} file(s) could not be processed:")
        for outcome in report.errors:
            err_console.print(f"  [red]✗[/] {escape(str(outcome.path))}: {escape(outcome.error or '')}")
        sys.exit(1)
