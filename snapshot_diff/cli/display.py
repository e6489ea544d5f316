"""
Rich terminal display utilities for CLI.

Provides formatted output using the Rich library for:
- Syntax-highlighted diff JSON
- Change summary tables
- Error messages with suggested fixes
- Success/failure indicators
"""

import json
from typing import Any, Dict, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.markup import escape

from snapshot_diff.errors import SnapshotDiffError
from snapshot_diff.model.fields import CANDIDATE_CATEGORIES, Field
from snapshot_diff.validation.error_formatter import format_error, suggest_fix


console = Console()


def print_header(title: str) -> None:
    """Print a formatted header."""
    console.print()
    console.print(f"[bold cyan]{title}[/bold cyan]")
    console.print("=" * len(title))
    console.print()


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message with X mark."""
    console.print(f"[red]✗[/red] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {message}")


def print_json(data: Any, title: Optional[str] = None, indent: int = 2) -> None:
    """
    Print JSON data with syntax highlighting.

    Args:
        data: JSON-serializable data or JSON string
        title: Optional title for the panel
        indent: Indentation used when data is not already a string
    """
    if isinstance(data, str):
        json_str = data
    else:
        json_str = json.dumps(data, indent=indent, ensure_ascii=False)

    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)

    if title:
        panel = Panel(syntax, title=f"[bold]{title}[/bold]", border_style="cyan")
        console.print(panel)
    else:
        console.print(syntax)


def print_snapshot_error(error: SnapshotDiffError) -> None:
    """Print a diff error with its location and a suggested fix."""
    print_error(escape(format_error(error)))
    console.print(f"  [yellow]→[/yellow] {escape(suggest_fix(error))}")


def print_meta_changes(result: Dict[str, Any]) -> None:
    """Print changed meta fields as a before/after table."""
    rows = result.get(Field.META.value)
    if not rows:
        return

    table = Table(title="Meta Changes", show_header=True, header_style="bold cyan")
    table.add_column("Field", style="cyan")
    table.add_column("Before", style="red")
    table.add_column("After", style="green")

    for row in rows:
        table.add_row(
            escape(str(row[Field.FIELD.value])),
            escape(json.dumps(row[Field.BEFORE.value], ensure_ascii=False)),
            escape(json.dumps(row[Field.AFTER.value], ensure_ascii=False)),
        )

    console.print()
    console.print(table)


def print_diff_summary(result: Dict[str, Any]) -> None:
    """
    Print a table of change counts per section.

    Args:
        result: Diff tree returned by the engine
    """
    table = Table(title="Diff Summary", show_header=True, header_style="bold cyan")
    table.add_column("Section", style="cyan", width=20)
    table.add_column("Changes", justify="right", width=10)

    table.add_row("meta fields", str(len(result.get(Field.META.value, []))))

    candidates = result.get(Field.CANDIDATES.value, {})
    for category in CANDIDATE_CATEGORIES:
        table.add_row(f"candidates {category.value}", str(len(candidates.get(category.value, []))))

    console.print()
    console.print(table)
    console.print()


def print_separator() -> None:
    """Print a visual separator line."""
    console.print("[dim]" + "─" * 70 + "[/dim]")
