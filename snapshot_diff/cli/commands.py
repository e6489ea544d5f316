"""
CLI command implementations.

This module contains the logic behind each CLI command:
- diff: Diff two snapshot files
- check: Run the presence checks on one snapshot file

Commands raise SnapshotDiffError on bad input; main.py turns that into a
printed message and a non-zero exit code.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from snapshot_diff.config import DiffConfig
from snapshot_diff.engine import DiffEngine
from snapshot_diff.model.fields import Field
from snapshot_diff.utils.documents import dump_result, load_document, save_result
from snapshot_diff.validation.checks import check_document

from .display import (
    print_header,
    print_success,
    print_info,
    print_json,
    print_meta_changes,
    print_diff_summary,
    print_separator,
)

logger = logging.getLogger(__name__)


def diff_command(
    before_path: Path,
    after_path: Path,
    output_path: Optional[Path],
    indent: int,
    offset_hours: int,
    quiet: bool
) -> None:
    """
    Execute the diff command.

    Args:
        before_path: Path to the before snapshot
        after_path: Path to the after snapshot
        output_path: Optional path to save the diff JSON
        indent: JSON indentation for printed/saved output
        offset_hours: UTC offset time fields are rendered in
        quiet: Print only the diff JSON
    """
    config = DiffConfig(target_offset_hours=offset_hours)
    engine = DiffEngine(config)

    before = load_document(before_path)
    after = load_document(after_path)

    logger.debug(f"Diffing {before_path} against {after_path} at UTC{offset_hours:+d}")
    result = engine.diff(before, after)

    if output_path:
        save_result(result, output_path, indent)

    if quiet:
        typer.echo(dump_result(result, indent))
        return

    print_header("Snapshot Diff")
    print_info(f"Before: [bold]{escape(str(before_path))}[/bold]")
    print_info(f"After: [bold]{escape(str(after_path))}[/bold]")
    print_separator()

    if not result:
        print_success("No differences found")
    else:
        print_json(result, title="Diff", indent=indent)
        print_meta_changes(result)
        print_diff_summary(result)

    if output_path:
        print_success(f"Diff saved to: {escape(str(output_path))}")


def check_command(document_path: Path) -> None:
    """
    Execute the check command.

    Args:
        document_path: Path to the snapshot to check
    """
    print_header("Snapshot Diff - Check Document")

    document = load_document(document_path)
    print_success(f"Loaded JSON from: {escape(str(document_path))}")

    check_document(document)

    candidates = document.get(Field.CANDIDATES.value, [])
    print_success("Document passes all presence checks")
    print_info(f"Id: [bold]{escape(repr(document.get(Field.ID.value)))}[/bold]")
    print_info(f"Candidates: [bold]{len(candidates)}[/bold]")
