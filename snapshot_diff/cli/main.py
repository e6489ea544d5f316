"""
Main CLI entry point using Typer.

This module defines the command-line interface for snapshot-diff.
It provides two commands: diff and check.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from typing_extensions import Annotated

from snapshot_diff.config import DEFAULT_OFFSET_HOURS
from snapshot_diff.errors import SnapshotDiffError
from snapshot_diff.utils.logging import setup_logging

from .commands import diff_command, check_command
from .display import print_error, print_snapshot_error


# Create Typer app
app = typer.Typer(
    name="snapshot-diff",
    help="snapshot-diff - Compare before/after JSON snapshots",
    add_completion=False,
    rich_markup_mode="rich"
)


def _fail(error: Exception) -> None:
    if isinstance(error, SnapshotDiffError):
        print_snapshot_error(error)
    else:
        print_error(f"Command failed: {escape(str(error))}")
    raise typer.Exit(code=1)


@app.command("diff")
def diff(
    before: Annotated[
        Path,
        typer.Option("--before", "-b", help="Path to the before snapshot JSON", dir_okay=False)
    ],
    after: Annotated[
        Path,
        typer.Option("--after", "-a", help="Path to the after snapshot JSON", dir_okay=False)
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Path to save the diff JSON", dir_okay=False)
    ] = None,
    indent: Annotated[
        int,
        typer.Option("--indent", help="JSON indentation (0 for compact output)", min=0)
    ] = 2,
    offset_hours: Annotated[
        int,
        typer.Option("--offset-hours", help="UTC offset time fields are rendered in", min=-18, max=18)
    ] = DEFAULT_OFFSET_HOURS,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Print only the diff JSON")
    ] = False,
) -> None:
    """
    Diff two snapshots of the same entity.

    Example:
        snapshot-diff diff \\
            --before before.json \\
            --after after.json \\
            --output diff.json
    """
    try:
        diff_command(
            before_path=before,
            after_path=after,
            output_path=output,
            indent=indent,
            offset_hours=offset_hours,
            quiet=quiet
        )
    except (SnapshotDiffError, OSError) as e:
        _fail(e)


@app.command("check")
def check(
    document: Annotated[
        Path,
        typer.Option("--document", "-d", help="Path to the snapshot JSON to check", dir_okay=False)
    ],
) -> None:
    """
    Check that a snapshot has the fields a diff requires.

    Example:
        snapshot-diff check --document before.json
    """
    try:
        check_command(document_path=document)
    except (SnapshotDiffError, OSError) as e:
        _fail(e)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """
    snapshot-diff - Compare before/after JSON snapshots.

    Reports changed meta fields and added, removed or edited candidates.
    """
    if version:
        from snapshot_diff import __version__
        typer.echo(f"snapshot-diff version {__version__}")
        raise typer.Exit()

    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def cli() -> None:
    """CLI entry point for the console script."""
    app()


if __name__ == "__main__":
    cli()
