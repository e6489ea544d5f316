"""
snapshot-diff: Structured diffs of before/after entity snapshots

A snapshot is a JSON document with an id, a meta block (title, startTime,
endTime) and a list of candidates keyed by id. snapshot-diff compares two
snapshots of the same entity and reports which meta fields changed and which
candidates were added, removed or edited.

Key Features:
    - Meta field changes with before/after values
    - Time fields normalized to a fixed offset (UTC+2 by default)
    - Candidate reconciliation by id: removed, edited, added
    - Empty sections omitted; diffing a snapshot with itself yields {}
    - Typer/Rich CLI for diffing and checking files

Quick Start:
    ```python
    from snapshot_diff import diff

    before = {
        "id": 7,
        "meta": {"title": "A", "startTime": "2023-01-01T10:00:00+00:00",
                 "endTime": "2023-01-01T12:00:00+00:00"},
        "candidates": [{"id": 1, "x": "a"}, {"id": 2, "x": "b"}],
    }
    after = {
        "id": 7,
        "meta": {"title": "B", "startTime": "2023-01-01T10:00:00+00:00",
                 "endTime": "2023-01-01T12:00:00+00:00"},
        "candidates": [{"id": 1, "x": "a"}, {"id": 3, "x": "c"}],
    }

    diff(before, after)
    # {"meta": [{"field": "title", "before": "A", "after": "B"}],
    #  "candidates": {"removed": [{"id": 2}], "added": [{"id": 3}]}}
    ```

Architecture:
    1. Validation: presence checks on documents, meta and candidates
    2. Meta differ: before-side key walk with timestamp normalization
    3. Candidate differ: two-pass reconcile by id
    4. Engine: id check, then merge of non-empty sections
"""

__version__ = "0.1.0"

# Main API exports - these are the primary user-facing names
from snapshot_diff.api import DiffEngine, DiffConfig, diff  # noqa: F401
from snapshot_diff.errors import (  # noqa: F401
    SnapshotDiffError,
    NullInputError,
    IdentifierMismatchError,
    MissingMetaError,
    IncompleteMetaError,
    MissingCandidatesError,
    MissingCandidateIdError,
    TimestampParseError,
    DocumentShapeError,
    DocumentLoadError,
)

__all__ = [
    "diff",
    "DiffEngine",
    "DiffConfig",
    "SnapshotDiffError",
    "NullInputError",
    "IdentifierMismatchError",
    "MissingMetaError",
    "IncompleteMetaError",
    "MissingCandidatesError",
    "MissingCandidateIdError",
    "TimestampParseError",
    "DocumentShapeError",
    "DocumentLoadError",
]
