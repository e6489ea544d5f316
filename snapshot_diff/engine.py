"""
Diff engine - the entry point that turns two snapshots into one diff tree.

A snapshot document has the shape:

    {
        "id": 42,
        "meta": {"title": ..., "startTime": ..., "endTime": ..., ...},
        "candidates": [{"id": 1, ...}, {"id": 2, ...}]
    }

and the diff result is a plain JSON tree:

    {
        "meta": [{"field": "title", "before": "A", "after": "B"}],
        "candidates": {
            "removed": [{"id": 2}],
            "edited": [{"id": 1}],
            "added": [{"id": 3}]
        }
    }

Sections without differences are omitted, so diffing a document against
itself returns {}.

Usage:
    ```python
    from snapshot_diff import diff, DiffEngine, DiffConfig

    result = diff(before, after)

    # Render time fields at UTC instead of UTC+2
    engine = DiffEngine(DiffConfig(target_offset_hours=0))
    result = engine.diff(before, after)
    ```
"""

from typing import Any, Dict, Optional

from snapshot_diff.config import DEFAULT_CONFIG, DiffConfig
from snapshot_diff.diffing.candidate_differ import diff_candidates
from snapshot_diff.diffing.meta_differ import diff_meta
from snapshot_diff.errors import IdentifierMismatchError
from snapshot_diff.model.fields import Field
from snapshot_diff.model.tree import json_equal
from snapshot_diff.validation.checks import require_document


def _same_identifier(left: Any, right: Any) -> bool:
    # no numeric widening: 1 and 1.0 are different ids
    return type(left) is type(right) and json_equal(left, right)


class DiffEngine:
    """
    Computes the diff between a before and an after snapshot.

    The engine holds only its configuration; every call builds its result
    from scratch, so one instance can be shared freely.
    """

    def __init__(self, config: Optional[DiffConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def diff(self, before: Optional[Dict[str, Any]], after: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Diff two snapshot documents.

        Args:
            before: The earlier snapshot
            after: The later snapshot

        Returns:
            Dict[str, Any]: Diff tree with optional "meta" and "candidates" keys

        Raises:
            NullInputError: If either document is None
            IdentifierMismatchError: If the documents have different ids
            MissingMetaError: If a meta block is absent
            IncompleteMetaError: If a meta block lacks a required field
            MissingCandidatesError: If a candidates list is absent
            TimestampParseError: If a changed time-like value cannot be parsed
        """
        before = require_document(before, "first")
        after = require_document(after, "second")

        before_id = before.get(Field.ID.value)
        after_id = after.get(Field.ID.value)
        if not _same_identifier(before_id, after_id):
            raise IdentifierMismatchError(before_id, after_id)

        result: Dict[str, Any] = {}

        meta_diffs = diff_meta(
            before.get(Field.META.value),
            after.get(Field.META.value),
            self.config,
        )
        if meta_diffs:
            result[Field.META.value] = [row.to_dict() for row in meta_diffs]

        candidate_diffs = diff_candidates(
            before.get(Field.CANDIDATES.value),
            after.get(Field.CANDIDATES.value),
        )
        if candidate_diffs:
            result[Field.CANDIDATES.value] = {
                category: [row.to_dict() for row in rows]
                for category, rows in candidate_diffs.items()
            }

        return result


def diff(
    before: Optional[Dict[str, Any]],
    after: Optional[Dict[str, Any]],
    config: Optional[DiffConfig] = None,
) -> Dict[str, Any]:
    """Diff two snapshot documents with a one-off engine. See DiffEngine.diff."""
    return DiffEngine(config).diff(before, after)
