"""
Command-line interface module.

This module provides a rich terminal interface for snapshot-diff using Typer and Rich.

Commands:
    - diff: Diff a before and an after snapshot
    - check: Run the presence checks on a single snapshot

Example Usage:
    ```bash
    # Pretty diff with a summary table
    snapshot-diff diff --before before.json --after after.json

    # Raw JSON only, saved to a file as well
    snapshot-diff diff -b before.json -a after.json --quiet --output diff.json

    # Check a snapshot before diffing it
    snapshot-diff check --document before.json
    ```
"""

from .main import app

__all__ = ["app"]
