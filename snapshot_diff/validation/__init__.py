"""
Validation layer module.

This module holds the presence checks every document passes before it is
diffed, and the formatting used to report failures to users.

Components:
    - checks: Document, meta and candidates presence checks
    - error_formatter: Convert SnapshotDiffError to human-readable messages

Example:
    ```python
    from snapshot_diff.errors import SnapshotDiffError
    from snapshot_diff.validation import check_document, format_error, suggest_fix

    try:
        check_document(document)
    except SnapshotDiffError as e:
        print(format_error(e))
        print(suggest_fix(e))
    ```
"""

from snapshot_diff.validation.checks import (
    check_document,
    require_document,
    require_meta,
    require_candidates,
)
from snapshot_diff.validation.error_formatter import format_error, suggest_fix

__all__ = [
    "check_document",
    "require_document",
    "require_meta",
    "require_candidates",
    "format_error",
    "suggest_fix",
]
